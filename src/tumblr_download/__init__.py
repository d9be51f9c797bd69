"""
Tumblr Download - fetch photo posts from a Tumblr blog's v1 JSON feed.

Downloads the full-resolution image of every photo post on one page of a
blog's feed (or on every page, in "all" mode) into the current directory.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .api_client import TumblrFeedClient, build_feed_url, render_raw_json, strip_jsonp
from .downloader import PhotoDownloader, filename_from_url
from .exceptions import (
    DownloadError,
    FeedError,
    FeedFetchError,
    FeedParseError,
    TumblrDownloadError,
)
from .models import BlogInfo, FeedPage, Post
from .pagination import PaginationResult, compute_page_count, download_all_pages

__all__ = [
    "__version__",
    "__license__",
    # Feed access
    "TumblrFeedClient",
    "build_feed_url",
    "render_raw_json",
    "strip_jsonp",
    # Downloads
    "PhotoDownloader",
    "filename_from_url",
    "PaginationResult",
    "compute_page_count",
    "download_all_pages",
    # Models
    "BlogInfo",
    "FeedPage",
    "Post",
    # Exceptions
    "TumblrDownloadError",
    "FeedError",
    "FeedFetchError",
    "FeedParseError",
    "DownloadError",
]
