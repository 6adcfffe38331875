"""
Loading module for the tour catalog.

Provides the one-shot listing document loader.
"""

from .tour_loader import TourLoader, is_remote_source, load_catalog, parse_tours

__all__ = ['TourLoader', 'is_remote_source', 'load_catalog', 'parse_tours']
