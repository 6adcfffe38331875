"""
Page surface for the tour catalog.

The page holds the filter controls and display elements the catalog reads
from and writes to, each addressed by a fixed element id.
"""

import html
import json
import logging
from typing import Dict, Optional

from tour_catalog.models import ActivityCategory, PriceBucket


logger = logging.getLogger(__name__)

TOURS_CONTAINER_ID = 'tours-container'
TOUR_COUNT_ID = 'tour-count'
ACTIVITY_FILTER_ID = 'activity-filter'
PRICE_FILTER_ID = 'price-filter'
SEARCH_INPUT_ID = 'search-input'

CONTROL_IDS = (ACTIVITY_FILTER_ID, PRICE_FILTER_ID, SEARCH_INPUT_ID)
DISPLAY_IDS = (TOURS_CONTAINER_ID, TOUR_COUNT_ID)

ACTIVITY_LABELS = {
    ActivityCategory.AIRBOAT: 'Airboat Tours',
    ActivityCategory.KAYAK: 'Kayak & Canoe',
    ActivityCategory.WILDLIFE: 'Wildlife & Gators',
    ActivityCategory.FISHING: 'Fishing Charters',
    ActivityCategory.BOAT_TOUR: 'Boat Tours',
    ActivityCategory.ECO_TOUR: 'Eco Tours',
    ActivityCategory.NIGHT: 'Night & Sunset',
    ActivityCategory.PRIVATE: 'Private Charters',
}

PRICE_LABELS = {
    PriceBucket.ANY: 'Any Price',
    PriceBucket.UNDER_50: 'Under $50',
    PriceBucket.FROM_50_TO_100: '$50 - $100',
    PriceBucket.FROM_100_TO_200: '$100 - $200',
    PriceBucket.OVER_200: '$200+',
}

TRACKING_SCRIPT = """
function trackBookingClick(tourName, tourId, price) {{
  if (typeof gtag !== 'undefined') {{
    gtag('event', {event_name}, {{
      'event_category': {category},
      'event_label': tourName,
      'tour_id': tourId,
      'value': price,
      'currency': {currency}
    }});
  }}
}}
"""


def tracking_script(
    event_name: str = 'booking_click',
    category: str = 'conversion',
    currency: str = 'USD'
) -> str:
    """Build the inline script backing the cards' call-to-action links."""
    # json.dumps output is a valid JS string literal
    return TRACKING_SCRIPT.format(
        event_name=json.dumps(event_name),
        category=json.dumps(category),
        currency=json.dumps(currency),
    ).replace('</', '<\\/')


class PageSurface:
    """In-memory page holding control values and rendered element content.

    Attributes:
        controls: Current value of each filter control, by element id
        elements: Current content of each display element, by element id
    """

    def __init__(self):
        self.controls: Dict[str, str] = {control_id: '' for control_id in CONTROL_IDS}
        self.elements: Dict[str, str] = {element_id: '' for element_id in DISPLAY_IDS}

    def set_control_value(self, control_id: str, value: Optional[str]) -> None:
        if control_id not in self.controls:
            raise KeyError(f"Unknown control: {control_id}")
        self.controls[control_id] = value or ''

    def get_control_value(self, control_id: str) -> str:
        return self.controls[control_id]

    def set_html(self, element_id: str, markup: str) -> None:
        self._set_content(element_id, markup)

    def set_text(self, element_id: str, text: str) -> None:
        self._set_content(element_id, html.escape(text))

    def get_content(self, element_id: str) -> str:
        return self.elements[element_id]

    def _set_content(self, element_id: str, content: str) -> None:
        if element_id not in self.elements:
            raise KeyError(f"Unknown element: {element_id}")
        self.elements[element_id] = content


def _render_options(labels: dict, selected: str, any_label: Optional[str] = None) -> str:
    options = []
    if any_label is not None:
        options.append(('', any_label))
    options.extend((member.value, label) for member, label in labels.items())

    rendered = []
    for value, label in options:
        marker = ' selected' if value == selected else ''
        rendered.append(
            f'<option value="{html.escape(value, quote=True)}"{marker}>'
            f'{html.escape(label)}</option>'
        )
    return '\n        '.join(rendered)


def render_page(
    page: PageSurface,
    title: str = 'Everglades Tours',
    script: Optional[str] = None
) -> str:
    """Render a complete standalone HTML document for a page surface.

    Args:
        page: Page whose controls and elements should be rendered
        title: Document title and heading
        script: Inline tracking script, defaults to the standard one

    Returns:
        HTML document as a string
    """
    activity_options = _render_options(
        ACTIVITY_LABELS,
        page.get_control_value(ACTIVITY_FILTER_ID),
        any_label='All Activities',
    )
    price_options = _render_options(PRICE_LABELS, page.get_control_value(PRICE_FILTER_ID))
    search_value = html.escape(page.get_control_value(SEARCH_INPUT_ID), quote=True)
    safe_title = html.escape(title)
    if script is None:
        script = tracking_script()

    logger.debug(f"Rendering page '{title}'")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{safe_title}</title>
</head>
<body>
  <header>
    <h1>{safe_title}</h1>
  </header>
  <section class="filters">
    <select id="{ACTIVITY_FILTER_ID}">
        {activity_options}
    </select>
    <select id="{PRICE_FILTER_ID}">
        {price_options}
    </select>
    <input type="search" id="{SEARCH_INPUT_ID}" placeholder="Search tours..." value="{search_value}">
  </section>
  <p class="results-count"><span id="{TOUR_COUNT_ID}">{page.get_content(TOUR_COUNT_ID)}</span> tours</p>
  <main id="{TOURS_CONTAINER_ID}">
{page.get_content(TOURS_CONTAINER_ID)}
  </main>
  <script>{script}</script>
</body>
</html>
"""
