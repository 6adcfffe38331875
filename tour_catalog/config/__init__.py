"""Configuration module for the Tour Catalog."""

from .catalog_config import (
    CATALOG_CONFIG,
    CatalogSettings,
    LoaderConfig,
    DisplayConfig,
    SearchConfig,
    TrackingConfig,
    get_catalog_settings,
)

__all__ = [
    'CATALOG_CONFIG',
    'CatalogSettings',
    'LoaderConfig',
    'DisplayConfig',
    'SearchConfig',
    'TrackingConfig',
    'get_catalog_settings',
]
