"""
Tour filter implementation for the catalog.

This module provides filtering of the working set by activity category,
price bucket and search text, and ordering of the result by quality score.
"""

from typing import Iterable, List

from tour_catalog.filtering.matchers import (
    matches_activity,
    matches_price,
    matches_search,
)
from tour_catalog.models import FilterState, Listing


def passes_filters(listing: Listing, state: FilterState) -> bool:
    """Check a listing against every non-empty filter of a filter state.

    Args:
        listing: Listing to check
        state: Current filter values

    Returns:
        True if the listing passes all active filters
    """
    if state.activity and not matches_activity(listing, state.activity):
        return False

    if state.price_range and not matches_price(listing, state.price_range):
        return False

    if state.search and not matches_search(listing, state.search):
        return False

    return True


def filter_tours(tours: Iterable[Listing], state: FilterState) -> List[Listing]:
    """Filter listings, keeping their relative order.

    Args:
        tours: Working set to filter
        state: Current filter values

    Returns:
        New list of listings that pass all active filters
    """
    return [tour for tour in tours if passes_filters(tour, state)]


def sort_by_quality(tours: Iterable[Listing]) -> List[Listing]:
    """Order listings by quality score, highest first.

    Missing scores count as 0. Listings with equal scores keep their
    relative order.

    Args:
        tours: Listings to order

    Returns:
        New sorted list
    """
    return sorted(tours, key=lambda tour: tour.sort_score, reverse=True)


class TourFilter:
    """Filters and orders tour listings for display.

    Wraps the filter pipeline and sorter so callers can hold a single
    collaborator, the same way the session holds its renderer and tracker.
    """

    def filter(self, tours: Iterable[Listing], state: FilterState) -> List[Listing]:
        return filter_tours(tours, state)

    def sort(self, tours: Iterable[Listing]) -> List[Listing]:
        return sort_by_quality(tours)

    def apply(self, tours: Iterable[Listing], state: FilterState) -> List[Listing]:
        """Filter the working set and order the result for display.

        Args:
            tours: Working set
            state: Current filter values

        Returns:
            Displayed set, sorted by quality score
        """
        return self.sort(self.filter(tours, state))
