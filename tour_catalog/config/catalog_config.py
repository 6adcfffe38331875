"""Catalog configuration settings for the Tour Catalog."""

from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


@dataclass
class LoaderConfig:
    """Listing document source configuration."""
    data_source: str = "tours-data.json"
    timeout_seconds: float = 10.0


@dataclass
class DisplayConfig:
    """Card rendering configuration."""
    description_length: int = 100
    page_title: str = "Everglades Tours"


@dataclass
class SearchConfig:
    """Search input configuration."""
    debounce_ms: int = 300

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


@dataclass
class TrackingConfig:
    """Booking click analytics configuration."""
    event_name: str = "booking_click"
    category: str = "conversion"
    currency: str = "USD"


@dataclass
class CatalogSettings:
    """Main catalog configuration settings."""
    loader: LoaderConfig = None
    display: DisplayConfig = None
    search: SearchConfig = None
    tracking: TrackingConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.loader is None:
            self.loader = LoaderConfig()
        if self.display is None:
            self.display = DisplayConfig()
        if self.search is None:
            self.search = SearchConfig()
        if self.tracking is None:
            self.tracking = TrackingConfig()


# Default catalog configuration
CATALOG_CONFIG = {
    "loader": {
        "data_source": os.getenv("TOURS_DATA_SOURCE", "tours-data.json"),
        "timeout_seconds": float(os.getenv("TOURS_FETCH_TIMEOUT", "10.0")),
    },
    "display": {
        "description_length": int(os.getenv("DESCRIPTION_LENGTH", "100")),
        "page_title": os.getenv("PAGE_TITLE", "Everglades Tours"),
    },
    "search": {
        "debounce_ms": int(os.getenv("SEARCH_DEBOUNCE_MS", "300")),
    },
    "tracking": {
        "event_name": os.getenv("TRACKING_EVENT_NAME", "booking_click"),
        "category": os.getenv("TRACKING_CATEGORY", "conversion"),
        "currency": os.getenv("TRACKING_CURRENCY", "USD"),
    },
}


def get_catalog_settings() -> CatalogSettings:
    """Get catalog settings from configuration."""
    return CatalogSettings(
        loader=LoaderConfig(**CATALOG_CONFIG["loader"]),
        display=DisplayConfig(**CATALOG_CONFIG["display"]),
        search=SearchConfig(**CATALOG_CONFIG["search"]),
        tracking=TrackingConfig(**CATALOG_CONFIG["tracking"]),
    )
