"""
Error handling module for the tour catalog.

Provides the catalog exception types and load-failure diagnostics.
"""

from .errors import CatalogError, CatalogLoadError, build_error_context, log_load_failure

__all__ = ['CatalogError', 'CatalogLoadError', 'build_error_context', 'log_load_failure']
