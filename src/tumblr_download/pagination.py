"""
All-pages mode: walk the feed page by page and download every photo.
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .api_client import PAGE_SIZE, TumblrFeedClient
from .downloader import PhotoDownloader


logger = logging.getLogger(__name__)


PAGE_DELAY = 10  # seconds between pages, to go easy on the server


@dataclass
class PaginationResult:
    """Outcome of an all-pages run."""

    pages_processed: int
    page_count: int

    def summary(self) -> str:
        return f"Done! {self.pages_processed} of {self.page_count} pages downloaded"


def compute_page_count(total_posts: Optional[int]) -> int:
    """Number of feed pages needed to hold ``total_posts`` posts."""
    if not total_posts or total_posts < 0:
        return 0
    return math.ceil(total_posts / PAGE_SIZE)


def download_all_pages(
    client: TumblrFeedClient,
    downloader: PhotoDownloader,
    sleep: Callable[[float], None] = time.sleep,
    delay: float = PAGE_DELAY
) -> PaginationResult:
    """
    Download the photos on every page of the feed.

    Page 1 is fetched first to learn the post total. Pages are then processed
    with indices ``1 .. page_count - 1``; the last computed page is never
    fetched. Everything runs quietly and sleeps ``delay`` seconds after each
    page.

    Args:
        client: Feed client for the blog
        downloader: Photo downloader
        sleep: Sleep function, replaceable in tests
        delay: Pause after each page, in seconds

    Returns:
        Pages processed and the computed page count

    Raises:
        FeedFetchError: If any feed request fails
        DownloadError: If any photo download fails
    """
    first_page = client.get_page(1, quiet=True)
    page_count = compute_page_count(first_page.total_posts)
    logger.info(f"Blog reports {first_page.total_posts or 0} posts across {page_count} pages")

    pages_processed = 0
    for page_number in range(1, page_count):
        logger.info(f"Processing page {page_number} of {page_count}")
        page = client.get_page(page_number, quiet=True)
        written = downloader.download_page(page, quiet=True)
        logger.debug(f"Page {page_number}: {written} photo(s) saved")
        pages_processed += 1
        sleep(delay)

    return PaginationResult(pages_processed=pages_processed, page_count=page_count)
