"""
Filtering module for tour listings.

This module provides the matcher predicates, the filter pipeline and the
quality-score sorter.
"""

from .matchers import (
    keywords_for,
    matches_activity,
    matches_price,
    matches_search,
)
from .tour_filter import TourFilter, filter_tours, passes_filters, sort_by_quality

__all__ = [
    'TourFilter',
    'filter_tours',
    'keywords_for',
    'matches_activity',
    'matches_price',
    'matches_search',
    'passes_filters',
    'sort_by_quality',
]
