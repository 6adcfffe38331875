"""
Catalog session for the Tour Catalog.

This module wires the filter controls of a page to the filter, sort and
render pipeline, and routes call-to-action clicks to the booking tracker.
"""

import logging
from typing import List, Optional

from tour_catalog.config import CatalogSettings
from tour_catalog.filtering import TourFilter
from tour_catalog.loading import TourLoader, load_catalog
from tour_catalog.models import CatalogState, FilterState, Listing
from tour_catalog.rate_limiting import Debouncer
from tour_catalog.rendering import CardRenderer, PageSurface
from tour_catalog.rendering.page import (
    ACTIVITY_FILTER_ID,
    PRICE_FILTER_ID,
    SEARCH_INPUT_ID,
)
from tour_catalog.tracking import AnalyticsSink, BookingTracker


logger = logging.getLogger(__name__)


class CatalogSession:
    """Owns the catalog state for one page and reacts to its events.

    Activity and price changes recompute immediately; search input
    recomputes once typing has been quiet for the debounce interval.

    Attributes:
        page: Page surface holding the controls and results area
        loader: Loader for the listing document
        renderer: Card renderer
        tracker: Booking click tracker
        state: Working set and displayed set
        tour_filter: Filter pipeline and sorter
        debouncer: Timer for search input
    """

    def __init__(
        self,
        page: PageSurface,
        loader: TourLoader,
        renderer: Optional[CardRenderer] = None,
        tracker: Optional[BookingTracker] = None,
        debounce_seconds: float = 0.3
    ):
        self.page = page
        self.loader = loader
        self.renderer = renderer or CardRenderer()
        self.tracker = tracker or BookingTracker()
        self.state = CatalogState()
        self.tour_filter = TourFilter()
        self.debouncer = Debouncer(debounce_seconds)
        self.loaded = False

    @classmethod
    def from_settings(
        cls,
        settings: CatalogSettings,
        page: Optional[PageSurface] = None,
        sink: Optional[AnalyticsSink] = None
    ) -> 'CatalogSession':
        """Build a session from catalog settings.

        Args:
            settings: Catalog configuration
            page: Page surface, a fresh one if not given
            sink: Optional analytics function

        Returns:
            Configured CatalogSession
        """
        return cls(
            page=page or PageSurface(),
            loader=TourLoader(
                source=settings.loader.data_source,
                timeout_seconds=settings.loader.timeout_seconds,
            ),
            renderer=CardRenderer(description_length=settings.display.description_length),
            tracker=BookingTracker(
                sink=sink,
                event_name=settings.tracking.event_name,
                category=settings.tracking.category,
                currency=settings.tracking.currency,
            ),
            debounce_seconds=settings.search.debounce_seconds,
        )

    async def start(self) -> bool:
        """Load the catalog once and render it unfiltered.

        Returns:
            True if the catalog loaded, False if the error view is shown
        """
        self.loaded = await load_catalog(self.loader, self.state, self.page, self.renderer)
        return self.loaded

    def read_filters(self) -> FilterState:
        return FilterState.from_controls(
            activity=self.page.get_control_value(ACTIVITY_FILTER_ID),
            price_range=self.page.get_control_value(PRICE_FILTER_ID),
            search=self.page.get_control_value(SEARCH_INPUT_ID),
        )

    def apply_filters(self) -> List[Listing]:
        """Recompute the displayed set from the current controls and render it.

        Returns:
            The new displayed set, sorted by quality score
        """
        filters = self.read_filters()
        displayed = self.tour_filter.apply(self.state.all_tours, filters)
        self.state.filtered_tours = tuple(displayed)

        logger.debug(
            f"Applied filters activity={filters.activity!r} "
            f"price={filters.price_range!r} search={filters.search!r}: "
            f"{len(displayed)}/{len(self.state.all_tours)} tours"
        )

        self.renderer.render(displayed, self.page)
        return displayed

    def on_activity_change(self, value: str) -> List[Listing]:
        self.page.set_control_value(ACTIVITY_FILTER_ID, value)
        return self.apply_filters()

    def on_price_change(self, value: str) -> List[Listing]:
        self.page.set_control_value(PRICE_FILTER_ID, value)
        return self.apply_filters()

    def on_search_input(self, value: str) -> None:
        """Record search text and schedule a debounced recompute.

        Must be called from a running event loop.

        Args:
            value: Raw text of the search input
        """
        self.page.set_control_value(SEARCH_INPUT_ID, value)
        self.debouncer.schedule(self.apply_filters)

    def on_booking_click(self, listing: Listing) -> None:
        """Report a call-to-action click on a rendered card.

        The clicked listing is passed as rendered, so listings sharing an
        id (or missing one) are each reported with their own fields.

        Args:
            listing: Listing whose card was clicked
        """
        self.tracker.track_booking_click(listing.name, listing.id, listing.price)

    def close(self) -> None:
        """Cancel any pending debounced recompute."""
        self.debouncer.cancel()
