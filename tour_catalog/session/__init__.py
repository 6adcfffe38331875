"""Session module wiring page events to the catalog pipeline."""

from .catalog_session import CatalogSession

__all__ = ['CatalogSession']
