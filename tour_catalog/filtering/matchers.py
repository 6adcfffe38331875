"""
Matcher predicates for tour listings.

Each matcher takes one listing and one filter value and answers whether the
listing satisfies that filter.
"""

from typing import Tuple

from tour_catalog.models import ActivityCategory, Listing, PriceBucket


def keywords_for(activity: str) -> Tuple[str, ...]:
    """Expand an activity token into the keywords it matches on.

    Args:
        activity: Lowercased category token

    Returns:
        Keywords of the known category, or the token itself when the
        token is not a known category
    """
    try:
        return ActivityCategory(activity).keywords
    except ValueError:
        return (activity,)


def matches_activity(listing: Listing, activity: str) -> bool:
    """Check whether a listing belongs to an activity category.

    A keyword matches when it is a substring of the listing's tags joined
    by spaces or of its name, both compared in lowercase.

    Args:
        listing: Listing to check
        activity: Lowercased category token

    Returns:
        True if any keyword of the category matches
    """
    tags = ' '.join(tag.lower() for tag in listing.tags)
    name = (listing.name or '').lower()

    return any(
        keyword in tags or keyword in name
        for keyword in keywords_for(activity)
    )


def matches_price(listing: Listing, price_range: str) -> bool:
    """Check whether a listing's price falls into a price bucket.

    Listings without a price only match the "any" bucket. Unknown bucket
    values match every priced listing.

    Args:
        listing: Listing to check
        price_range: Bucket identifier such as "0-50" or "200+"

    Returns:
        True if the listing belongs to the bucket
    """
    if not listing.has_price:
        return price_range == PriceBucket.ANY.value

    price = listing.price

    if price_range == PriceBucket.UNDER_50.value:
        return price <= 50
    if price_range == PriceBucket.FROM_50_TO_100.value:
        return 50 < price <= 100
    if price_range == PriceBucket.FROM_100_TO_200.value:
        return 100 < price <= 200
    if price_range == PriceBucket.OVER_200.value:
        return price > 200

    return True


def searchable_text(listing: Listing) -> str:
    """Build the lowercase text a search query is matched against."""
    parts = [listing.name, listing.company, listing.description, *listing.tags]
    return ' '.join(part or '' for part in parts).lower()


def matches_search(listing: Listing, query: str) -> bool:
    """Check whether a search query appears in a listing.

    Args:
        listing: Listing to check
        query: Lowercased, trimmed search text

    Returns:
        True if the query is a substring of the listing's searchable text
    """
    return query in searchable_text(listing)
