"""
Data models for the Tour Catalog.

This module defines the core data structures used throughout the application.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Listing:
    """Represents one tour offering in the catalog.

    Attributes:
        id: Listing identifier, unique within a load
        name: Display title
        company: Tour operator name
        description: Free-text description
        tags: Short labels, first one is used as the card tag
        price: Price in dollars, None when the listing has no price
        duration_text: Free-text duration description
        free_cancellation: Whether the tour can be cancelled for free
        image: URL of the listing image
        booking_link: URL of the booking page
        quality_score: Ordering score, None is treated as 0
    """
    id: str
    name: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    price: Optional[float] = None
    duration_text: Optional[str] = None
    free_cancellation: bool = False
    image: Optional[str] = None
    booking_link: Optional[str] = None
    quality_score: Optional[float] = None

    @property
    def has_price(self) -> bool:
        return self.price is not None

    @property
    def sort_score(self) -> float:
        return self.quality_score if self.quality_score is not None else 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Listing':
        """Create Listing instance from one object of the data file.

        Unknown keys are ignored and missing optional keys fall back to
        their defaults. Prices that are negative, non-finite or not numeric
        are treated as absent.

        Args:
            data: Dictionary containing listing data

        Returns:
            Listing instance

        Raises:
            ValueError: If tags is present but not an array
        """
        raw_tags = data.get('tags')
        if raw_tags is None:
            raw_tags = []
        elif not isinstance(raw_tags, list):
            raise ValueError(f"tags must be an array, got {type(raw_tags).__name__}")
        tags = tuple(str(tag) for tag in raw_tags if tag is not None)

        raw_id = data.get('id')

        return cls(
            id='' if raw_id is None else str(raw_id),
            name=_optional_text(data.get('name')),
            company=_optional_text(data.get('company')),
            description=_optional_text(data.get('description')),
            tags=tags,
            price=_optional_price(data.get('price')),
            duration_text=_optional_text(data.get('durationText')),
            free_cancellation=bool(data.get('freeCancellation')),
            image=_optional_text(data.get('image')),
            booking_link=_optional_text(data.get('bookingLink')),
            quality_score=_optional_number(data.get('qualityScore')),
        )


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _optional_number(value: Any) -> Optional[float]:
    # bool is an int subclass, a flag is never a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _optional_price(value: Any) -> Optional[float]:
    number = _optional_number(value)
    if number is None or number < 0:
        return None
    return number


class ActivityCategory(str, Enum):
    """Activity categories offered by the category selector."""
    AIRBOAT = 'airboat'
    KAYAK = 'kayak'
    WILDLIFE = 'wildlife'
    FISHING = 'fishing'
    BOAT_TOUR = 'boat-tour'
    ECO_TOUR = 'eco-tour'
    NIGHT = 'night'
    PRIVATE = 'private'

    @property
    def keywords(self) -> Tuple[str, ...]:
        return ACTIVITY_KEYWORDS[self]


ACTIVITY_KEYWORDS: Dict[ActivityCategory, Tuple[str, ...]] = {
    ActivityCategory.AIRBOAT: ('airboat',),
    ActivityCategory.KAYAK: ('kayak', 'paddle', 'canoe'),
    ActivityCategory.WILDLIFE: ('wildlife', 'gator', 'alligator', 'animal', 'bird'),
    ActivityCategory.FISHING: ('fishing', 'fish'),
    ActivityCategory.BOAT_TOUR: ('boat tour', 'boat ride'),
    ActivityCategory.ECO_TOUR: ('eco', 'nature', 'mangrove'),
    ActivityCategory.NIGHT: ('night', 'sunset', 'evening'),
    ActivityCategory.PRIVATE: ('private', 'charter'),
}


class PriceBucket(str, Enum):
    """Price ranges offered by the price selector."""
    ANY = ''
    UNDER_50 = '0-50'
    FROM_50_TO_100 = '50-100'
    FROM_100_TO_200 = '100-200'
    OVER_200 = '200+'


@dataclass(frozen=True)
class FilterState:
    """Current values of the three filter controls.

    Empty strings mean "no constraint" for the corresponding filter.

    Attributes:
        activity: Lowercased activity category token
        price_range: Price bucket identifier
        search: Lowercased, trimmed search text
    """
    activity: str = ''
    price_range: str = ''
    search: str = ''

    @classmethod
    def from_controls(
        cls,
        activity: Optional[str],
        price_range: Optional[str],
        search: Optional[str]
    ) -> 'FilterState':
        """Normalize raw control values into a filter state.

        Args:
            activity: Raw value of the category selector
            price_range: Raw value of the price selector
            search: Raw value of the search input

        Returns:
            FilterState instance
        """
        return cls(
            activity=(activity or '').lower(),
            price_range=price_range or '',
            search=(search or '').lower().strip(),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.activity or self.price_range or self.search)


@dataclass
class CatalogState:
    """Application state owned by a catalog session.

    Attributes:
        all_tours: Working set, assigned once by the loader
        filtered_tours: Displayed set, replaced on every recompute
    """
    all_tours: Tuple[Listing, ...] = ()
    filtered_tours: Tuple[Listing, ...] = field(default_factory=tuple)

    def load(self, tours) -> None:
        self.all_tours = tuple(tours)
        self.filtered_tours = tuple(self.all_tours)
