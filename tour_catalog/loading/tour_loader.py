"""
Tour loader for the catalog.

Fetches the listing document once at startup, from a local path or an
http(s) URL, and populates the working set.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List

import aiohttp

from tour_catalog.error_handling import CatalogLoadError, log_load_failure
from tour_catalog.filtering import sort_by_quality
from tour_catalog.models import CatalogState, Listing
from tour_catalog.rendering import CardRenderer, PageSurface


logger = logging.getLogger(__name__)


def is_remote_source(source: str) -> bool:
    return source.startswith(('http://', 'https://'))


def parse_tours(payload: Any, source: str) -> List[Listing]:
    """Convert a decoded listing document into listings.

    Args:
        payload: Decoded JSON document
        source: Path or URL the document came from, for error messages

    Returns:
        Listings in document order

    Raises:
        CatalogLoadError: If the document is not an array of objects or an
            entry has a field of the wrong type
    """
    if not isinstance(payload, list):
        raise CatalogLoadError(source, f"expected a JSON array, got {type(payload).__name__}")

    tours = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise CatalogLoadError(
                source,
                f"entry {index} is {type(item).__name__}, expected an object"
            )
        try:
            tours.append(Listing.from_dict(item))
        except (TypeError, ValueError) as e:
            raise CatalogLoadError(source, f"entry {index}: {e}") from e

    return tours


class TourLoader:
    """Loads the listing document from a file or URL.

    Attributes:
        source: Local path or http(s) URL of the listing document
        timeout_seconds: Total timeout for a remote fetch
    """

    def __init__(self, source: str = 'tours-data.json', timeout_seconds: float = 10.0):
        self.source = source
        self.timeout_seconds = timeout_seconds

    async def fetch(self) -> List[Listing]:
        """Fetch and parse the listing document.

        Returns:
            Listings in document order

        Raises:
            CatalogLoadError: On any fetch or parse failure
        """
        try:
            if is_remote_source(self.source):
                text = await self._fetch_remote()
            else:
                text = Path(self.source).read_text(encoding='utf-8')
        except CatalogLoadError:
            raise
        except (OSError, UnicodeDecodeError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise CatalogLoadError(self.source, f"{type(e).__name__}: {e}") from e

        try:
            payload = json.loads(text)
        except ValueError as e:
            raise CatalogLoadError(self.source, f"invalid JSON: {e}") from e

        tours = parse_tours(payload, self.source)
        logger.info(f"Loaded {len(tours)} tours from {self.source}")
        return tours

    async def _fetch_remote(self) -> str:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(self.source) as response:
                if response.status != 200:
                    raise CatalogLoadError(self.source, f"HTTP {response.status}")
                return await response.text()


async def load_catalog(
    loader: TourLoader,
    state: CatalogState,
    page: PageSurface,
    renderer: CardRenderer
) -> bool:
    """Populate the working set and render the unfiltered catalog.

    On failure the error is logged and the load error view replaces the
    results container. The load is attempted exactly once.

    Args:
        loader: Loader for the listing document
        state: Catalog state to populate
        page: Page surface to render onto
        renderer: Card renderer

    Returns:
        True if the catalog loaded, False if the error view was shown
    """
    try:
        tours = await loader.fetch()
    except CatalogLoadError as e:
        log_load_failure(loader.source, e)
        renderer.render_error(page)
        return False

    state.load(tours)
    state.filtered_tours = tuple(sort_by_quality(state.all_tours))
    renderer.render(state.filtered_tours, page)
    return True
