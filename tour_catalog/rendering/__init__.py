"""
Rendering module for the tour catalog.

Provides the tour card renderer and the page surface it writes to.
"""

from .card_renderer import (
    CardRenderer,
    RenderedView,
    clean_duration,
    format_price,
    render_card,
    render_load_error,
    render_tours,
    truncate,
)
from .page import PageSurface, render_page, tracking_script

__all__ = [
    'CardRenderer',
    'PageSurface',
    'RenderedView',
    'clean_duration',
    'format_price',
    'render_card',
    'render_load_error',
    'render_page',
    'render_tours',
    'tracking_script',
    'truncate',
]
