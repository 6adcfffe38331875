"""
Main entry point and CLI for the Tour Catalog.

Loads the listing document, applies the activity, price and search filters
given on the command line, and writes the rendered catalog page.
"""

import asyncio
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tour_catalog.config import CATALOG_CONFIG, get_catalog_settings
from tour_catalog.models import ActivityCategory, FilterState, Listing, PriceBucket
from tour_catalog.rendering import format_price, render_page, tracking_script
from tour_catalog.rendering.page import (
    ACTIVITY_FILTER_ID,
    PRICE_FILTER_ID,
    SEARCH_INPUT_ID,
)
from tour_catalog.session import CatalogSession


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def format_tour(tour: Listing) -> str:
    """
    Format a listing for console output.

    Args:
        tour: Listing to format

    Returns:
        Formatted string representation of the listing
    """
    lines = [f"📌 {tour.name or '[No name]'}"]
    if tour.company:
        lines.append(f"   Company: {tour.company}")
    lines.append(f"   Price: {format_price(tour.price)}")
    if tour.quality_score is not None:
        lines.append(f"   Score: {tour.quality_score}")
    if tour.booking_link:
        lines.append(f"   Book: {tour.booking_link}")
    lines.append("")
    return "\n".join(lines)


def format_results(tours: List[Listing]) -> str:
    """
    Format the displayed set for console output.

    Args:
        tours: Sorted displayed set

    Returns:
        Formatted string representation of all listings
    """
    if not tours:
        return "No tours found. Try adjusting your filters or search terms.\n"

    output = [f"\n{'='*60}", f"Found {len(tours)} tour(s)", f"{'='*60}\n"]
    output.extend(format_tour(tour) for tour in tours)
    output.append(f"{'='*60}\n")
    return "\n".join(output)


async def run_catalog(
    source: Optional[str] = None,
    activity: Optional[str] = None,
    price_range: Optional[str] = None,
    search: Optional[str] = None,
    output: Optional[str] = None,
    verbose: bool = False
) -> int:
    """
    Load the catalog, apply filters and write the rendered page.

    Args:
        source: Listing document path or URL, defaults to configuration
        activity: Activity category filter (optional)
        price_range: Price bucket filter (optional)
        search: Search text filter (optional)
        output: File to write the HTML page to (optional), replaces the
            console summary
        verbose: Enable verbose logging output

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    settings = get_catalog_settings()
    if source:
        settings.loader.data_source = source
    logger.debug(f"Using configuration: {CATALOG_CONFIG}")

    filters = FilterState.from_controls(activity, price_range, search)
    session = CatalogSession.from_settings(settings)
    try:
        loaded = await session.start()

        if loaded and not filters.is_empty:
            session.page.set_control_value(ACTIVITY_FILTER_ID, activity)
            session.page.set_control_value(PRICE_FILTER_ID, price_range)
            session.page.set_control_value(SEARCH_INPUT_ID, search)
            session.apply_filters()

        if output:
            page_html = render_page(
                session.page,
                title=settings.display.page_title,
                script=tracking_script(
                    settings.tracking.event_name,
                    settings.tracking.category,
                    settings.tracking.currency,
                ),
            )
            Path(output).write_text(page_html, encoding='utf-8')
            logger.info(f"Catalog page saved to: {output}")

        if not loaded:
            print(f"❌ Unable to load tours from {settings.loader.data_source}", file=sys.stderr)
            return 1

        displayed = list(session.state.filtered_tours)
        if output:
            print(f"✅ Wrote {len(displayed)} tour(s) to {output}")
        else:
            print(format_results(displayed))
        return 0
    finally:
        session.close()


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    activities = ", ".join(category.value for category in ActivityCategory)
    buckets = ", ".join(bucket.value for bucket in PriceBucket if bucket.value)

    parser = argparse.ArgumentParser(
        prog="tour-catalog",
        description="Browse a catalog of tour listings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show every tour, best rated first
  tour-catalog --source tours-data.json

  # Wildlife tours under $50
  tour-catalog --activity wildlife --price 0-50

  # Search and write the page to a file
  tour-catalog --search kayak --output tours.html
        """
    )

    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Listing document path or http(s) URL (default: TOURS_DATA_SOURCE or tours-data.json)"
    )

    parser.add_argument(
        "--activity",
        type=str,
        default=None,
        help=f"Activity category ({activities})"
    )

    parser.add_argument(
        "--price",
        type=str,
        default=None,
        help=f"Price bucket ({buckets})"
    )

    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Free-text search over name, company, description and tags"
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the rendered HTML page to this file"
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    return parser


def main() -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        return asyncio.run(
            run_catalog(
                source=args.source,
                activity=args.activity,
                price_range=args.price,
                search=args.search,
                output=args.output,
                verbose=args.verbose
            )
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error in main: {str(e)}")
        print(f"❌ Unexpected error: {str(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
