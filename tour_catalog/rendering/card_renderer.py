"""
Card renderer for the tour catalog.

Turns the displayed set into HTML tour cards and writes them, together with
the result count, onto the page surface.
"""

import html
import json
import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from tour_catalog.models import Listing
from tour_catalog.rendering.page import TOUR_COUNT_ID, TOURS_CONTAINER_ID, PageSurface


logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION_LENGTH = 100
PRICE_PLACEHOLDER = 'Check Price'
TAG_PLACEHOLDER = 'Tour'
FALLBACK_DESCRIPTION = 'Experience the Everglades with this local tour operator.'

NO_RESULTS_HTML = """
      <div class="no-results">
        <h3>No tours found</h3>
        <p>Try adjusting your filters or search terms.</p>
      </div>
"""

LOAD_ERROR_HTML = (
    '<div class="no-results"><h3>Unable to load tours</h3>'
    '<p>Please refresh the page.</p></div>'
)

_DURATION_LABEL = re.compile(r'Duration\s*', re.IGNORECASE)
_LINE_BREAK = re.compile(r'\r\n|\r|\n')


@dataclass(frozen=True)
class RenderedView:
    """Rendered results area.

    Attributes:
        count: Number of listings in the displayed set
        html: Markup for the results container
    """
    count: int
    html: str

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def format_price(price: Optional[float]) -> str:
    """Format a price label such as "$75" or the placeholder when absent."""
    if price is None:
        return PRICE_PLACEHOLDER
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price}"


def truncate(text: Optional[str], length: int = DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Shorten text to a maximum length with a trailing ellipsis.

    Trailing whitespace left by the cut is removed before the ellipsis is
    appended.

    Args:
        text: Text to shorten
        length: Maximum number of characters kept from the text

    Returns:
        Original text if short enough, otherwise the shortened text
    """
    if not text:
        return ''
    if len(text) <= length:
        return text
    return text[:length].rstrip() + '...'


def clean_duration(duration: str) -> str:
    """Strip the "Duration" label and flatten line breaks."""
    without_label = _DURATION_LABEL.sub('', duration)
    return _LINE_BREAK.sub(' ', without_label).strip()


def _escape(value: Optional[str]) -> str:
    return html.escape(value or '', quote=True)


def _tracking_call(listing: Listing) -> str:
    price = listing.price if listing.has_price else 0
    args = ', '.join(json.dumps(arg) for arg in (listing.name or '', listing.id, price))
    return f"trackBookingClick({args})"


def render_card(listing: Listing, description_length: int = DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Render a single tour card.

    Args:
        listing: Listing to render
        description_length: Maximum visible description length

    Returns:
        HTML fragment for the card
    """
    tag = (listing.tags[0] if listing.tags else '') or TAG_PLACEHOLDER
    description = truncate(listing.description or FALLBACK_DESCRIPTION, description_length)

    meta = []
    if listing.duration_text:
        meta.append(f"<span>⏱ {_escape(clean_duration(listing.duration_text))}</span>")
    if listing.free_cancellation:
        meta.append('<span>✓ Free cancellation</span>')

    return f"""
    <article class="tour-card" data-tour-id="{_escape(listing.id)}">
      <div class="tour-image">
        <img src="{_escape(listing.image)}" alt="{_escape(listing.name)}" loading="lazy">
        <span class="tour-price">{_escape(format_price(listing.price))}</span>
        <span class="tour-tag">{_escape(tag)}</span>
      </div>
      <div class="tour-content">
        <h3 class="tour-name">{_escape(listing.name)}</h3>
        <p class="tour-company">{_escape(listing.company)}</p>
        <p class="tour-description">{_escape(description)}</p>
        <div class="tour-meta">
          {''.join(meta)}
        </div>
        <a href="{_escape(listing.booking_link) or '#'}"
           target="_blank"
           rel="noopener"
           class="tour-cta"
           onclick="{_escape(_tracking_call(listing))}">
          Check Availability
        </a>
      </div>
    </article>
  """


def render_tours(
    tours: Sequence[Listing],
    description_length: int = DEFAULT_DESCRIPTION_LENGTH
) -> RenderedView:
    """Render the displayed set.

    An empty set renders the "no results" block in place of any cards.

    Args:
        tours: Sorted displayed set
        description_length: Maximum visible description length

    Returns:
        RenderedView with the count and container markup
    """
    if not tours:
        return RenderedView(count=0, html=NO_RESULTS_HTML)

    cards = ''.join(render_card(tour, description_length) for tour in tours)
    return RenderedView(count=len(tours), html=cards)


def render_load_error() -> str:
    return LOAD_ERROR_HTML


class CardRenderer:
    """Writes rendered tour cards onto a page surface.

    Attributes:
        description_length: Maximum visible description length
    """

    def __init__(self, description_length: int = DEFAULT_DESCRIPTION_LENGTH):
        self.description_length = description_length

    def render(self, tours: Sequence[Listing], page: PageSurface) -> RenderedView:
        """Render the displayed set and update the count and container.

        Args:
            tours: Sorted displayed set
            page: Page surface to update

        Returns:
            The view written to the page
        """
        view = render_tours(tours, self.description_length)
        page.set_text(TOUR_COUNT_ID, str(view.count))
        page.set_html(TOURS_CONTAINER_ID, view.html)
        if view.is_empty:
            logger.debug("No tours match the current filters")
        else:
            logger.debug(f"Rendered {view.count} tour card(s)")
        return view

    def render_error(self, page: PageSurface) -> None:
        page.set_html(TOURS_CONTAINER_ID, render_load_error())
