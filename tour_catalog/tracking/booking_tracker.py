"""
Booking click tracking for the tour catalog.

Reports call-to-action clicks to an optional analytics sink.
"""

import logging
from typing import Any, Callable, Dict, Optional


logger = logging.getLogger(__name__)

AnalyticsSink = Callable[[str, Dict[str, Any]], Any]


class BookingTracker:
    """
    Sends a booking_click event when a tour's call-to-action is activated.

    When no sink is configured every call is a silent no-op.

    Attributes:
        sink: Analytics function called as sink(event_name, payload)
        event_name: Name of the reported event
        category: Event category label
        currency: Currency code attached to the event value
    """

    def __init__(
        self,
        sink: Optional[AnalyticsSink] = None,
        event_name: str = 'booking_click',
        category: str = 'conversion',
        currency: str = 'USD'
    ):
        self.sink = sink
        self.event_name = event_name
        self.category = category
        self.currency = currency

    @property
    def enabled(self) -> bool:
        return callable(self.sink)

    def build_payload(self, tour_name: Optional[str], tour_id: str, price: Optional[float]) -> Dict[str, Any]:
        return {
            'event_category': self.category,
            'event_label': tour_name or '',
            'tour_id': tour_id,
            'value': price if price is not None else 0,
            'currency': self.currency,
        }

    def track_booking_click(
        self,
        tour_name: Optional[str],
        tour_id: str,
        price: Optional[float] = None
    ) -> None:
        """
        Report a booking click.

        Args:
            tour_name: Listing name, used as the event label
            tour_id: Listing identifier
            price: Listing price, reported as 0 when absent
        """
        if not self.enabled:
            return

        payload = self.build_payload(tour_name, tour_id, price)
        logger.debug(f"Tracking {self.event_name}: {payload}")
        self.sink(self.event_name, payload)
