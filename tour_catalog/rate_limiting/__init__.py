"""
Rate limiting module for the tour catalog.

Provides the debounce timer used by the search input.
"""

from .debouncer import Debouncer

__all__ = ['Debouncer']
