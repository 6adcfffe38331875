"""
Property-based tests for data models.

These tests verify that listings are built from data file objects with the
documented defaults, and that filter state is normalized from raw controls.
"""

import dataclasses
import json

import pytest
from hypothesis import given, settings, strategies as st

from tour_catalog.models import (
    ACTIVITY_KEYWORDS,
    ActivityCategory,
    CatalogState,
    FilterState,
    Listing,
    PriceBucket,
)


# Strategy for extra keys a data file may carry
extra_keys = st.dictionaries(
    keys=st.text(min_size=1, max_size=10).filter(
        lambda key: key not in {
            'id', 'name', 'company', 'description', 'tags', 'price', 'durationText',
            'freeCancellation', 'image', 'bookingLink', 'qualityScore',
        }
    ),
    values=st.one_of(st.none(), st.integers(), st.text(max_size=10)),
    max_size=5,
)


@given(
    tour_id=st.one_of(st.integers(min_value=0, max_value=10**6), st.text(min_size=1, max_size=10)),
    extras=extra_keys,
)
@settings(max_examples=100)
def test_unknown_fields_are_ignored(tour_id, extras):
    """
    **Feature: tour-catalog, Property 8: Unknown field tolerance**

    For any data file object with extra keys, the listing is built from the
    known keys only and every optional field falls back to its default.
    """
    data = dict(extras)
    data['id'] = tour_id

    listing = Listing.from_dict(data)

    assert listing.id == str(tour_id)
    assert listing.name is None
    assert listing.tags == ()
    assert listing.price is None
    assert listing.free_cancellation is False
    assert listing.quality_score is None


@given(price=st.one_of(st.integers(min_value=0, max_value=10**6), st.floats(min_value=0, max_value=1e6)))
@settings(max_examples=100)
def test_non_negative_prices_are_kept(price):
    listing = Listing.from_dict({'id': 'x', 'price': price})

    assert listing.price == price
    assert listing.has_price


def test_from_dict_reads_all_fields():
    listing = Listing.from_dict({
        'id': 42,
        'name': 'Sunset Airboat Ride',
        'company': 'Glades Airboat Co.',
        'description': 'Golden hour on the water.',
        'tags': ['airboat', 'sunset'],
        'price': 75,
        'durationText': '1 hour',
        'freeCancellation': True,
        'image': 'https://example.com/a.jpg',
        'bookingLink': 'https://example.com/book',
        'qualityScore': 9.5,
    })

    assert listing.id == '42'
    assert listing.name == 'Sunset Airboat Ride'
    assert listing.company == 'Glades Airboat Co.'
    assert listing.tags == ('airboat', 'sunset')
    assert listing.price == 75
    assert listing.duration_text == '1 hour'
    assert listing.free_cancellation is True
    assert listing.booking_link == 'https://example.com/book'
    assert listing.quality_score == 9.5


def test_zero_price_is_distinct_from_missing_price():
    free = Listing.from_dict({'id': 'free', 'price': 0})
    unpriced = Listing.from_dict({'id': 'unpriced'})

    assert free.price == 0
    assert free.has_price
    assert unpriced.price is None
    assert not unpriced.has_price


@pytest.mark.parametrize('raw_price', [-5, 'cheap', True, None, [10]])
def test_invalid_prices_are_treated_as_absent(raw_price):
    listing = Listing.from_dict({'id': 'x', 'price': raw_price})

    assert listing.price is None


@pytest.mark.parametrize('raw_number', [float('nan'), float('inf'), float('-inf')])
def test_non_finite_numbers_are_treated_as_absent(raw_number):
    listing = Listing.from_dict({'id': 'x', 'price': raw_number, 'qualityScore': raw_number})

    assert listing.price is None
    assert listing.quality_score is None
    assert listing.sort_score == 0


def test_non_finite_numbers_from_json_are_treated_as_absent():
    data = json.loads('{"id": "x", "price": NaN, "qualityScore": Infinity}')

    listing = Listing.from_dict(data)

    assert not listing.has_price
    assert listing.quality_score is None


@pytest.mark.parametrize('raw_tags', [5, True, 'kayak'])
def test_non_array_tags_are_rejected(raw_tags):
    with pytest.raises(ValueError):
        Listing.from_dict({'id': 'x', 'tags': raw_tags})


def test_null_tags_become_empty():
    listing = Listing.from_dict({'id': 'x', 'tags': None})

    assert listing.tags == ()


def test_listing_is_immutable():
    listing = Listing(id='x', name='Original')

    with pytest.raises(dataclasses.FrozenInstanceError):
        listing.name = 'Changed'


def test_sort_score_defaults_to_zero():
    assert Listing(id='x').sort_score == 0
    assert Listing(id='x', quality_score=4).sort_score == 4


def test_every_category_has_keywords():
    for category in ActivityCategory:
        assert ACTIVITY_KEYWORDS[category]
        assert category.keywords == ACTIVITY_KEYWORDS[category]


def test_price_bucket_values():
    assert [bucket.value for bucket in PriceBucket] == ['', '0-50', '50-100', '100-200', '200+']


@given(
    activity=st.one_of(st.none(), st.text(max_size=10)),
    price_range=st.one_of(st.none(), st.text(max_size=10)),
    search=st.one_of(st.none(), st.text(max_size=20)),
)
@settings(max_examples=100)
def test_filter_state_normalizes_controls(activity, price_range, search):
    """
    **Feature: tour-catalog, Property 9: Filter state normalization**

    For any raw control values, the activity is lowercased, the search text
    is lowercased and trimmed, and the price bucket is kept as given.
    """
    state = FilterState.from_controls(activity, price_range, search)

    assert state.activity == (activity or '').lower()
    assert state.price_range == (price_range or '')
    assert state.search == (search or '').lower().strip()


def test_filter_state_is_empty():
    assert FilterState().is_empty
    assert not FilterState(search='kayak').is_empty


def test_catalog_state_load_copies_working_set():
    tours = [Listing(id='a'), Listing(id='b')]
    state = CatalogState()

    state.load(tours)
    tours.append(Listing(id='c'))

    assert state.all_tours == (Listing(id='a'), Listing(id='b'))
    assert state.filtered_tours == state.all_tours
