"""
Client for the Tumblr v1 public JSON feed.

This module builds feed URLs, fetches one page of the feed at a time, and
strips the JSONP wrapper the v1 API puts around its JSON. There is no retry:
any failure is raised to the caller as a FeedFetchError.
"""

import json
import logging
from typing import Optional

import requests
from requests.exceptions import RequestException

from .exceptions import FeedFetchError, FeedParseError
from .models import FeedPage


logger = logging.getLogger(__name__)


# API configuration
FEED_PATH = "/api/read/json"
PAGE_SIZE = 20  # Posts per page served by the v1 feed
JSONP_PREFIX = "var tumblr_api_read = "


def normalize_blog_url(blog_url: str) -> str:
    """
    Strip whitespace and a trailing slash from a blog URL.

    Args:
        blog_url: Blog base URL, e.g. ``https://myblog.tumblr.com/``

    Returns:
        The URL without the trailing slash
    """
    return blog_url.strip().removesuffix("/")


def build_feed_url(blog_url: str, page: int = 1) -> str:
    """
    Build the feed endpoint URL for a 1-based page number.

    Page 1 is the bare endpoint; later pages add a ``start`` offset of
    ``(page - 1) * PAGE_SIZE``.

    Args:
        blog_url: Blog base URL
        page: 1-based page number

    Returns:
        The full request URL

    Raises:
        ValueError: If page is less than 1

    Example:
        >>> build_feed_url("https://myblog.tumblr.com/", 3)
        'https://myblog.tumblr.com/api/read/json?start=40'
    """
    if page < 1:
        raise ValueError(f"Page number must be at least 1, got {page}")

    url = f"{normalize_blog_url(blog_url)}{FEED_PATH}"
    if page != 1:
        url = f"{url}?start={(page - 1) * PAGE_SIZE}"
    return url


def strip_jsonp(text: str) -> str:
    """
    Remove the ``var tumblr_api_read = ...;`` wrapper from a feed response.

    The prefix is removed once and every ``;`` is dropped. Semicolons inside
    the JSON itself are lost too, which is how the feed has always been read.

    Args:
        text: Raw response body

    Returns:
        Bare JSON text (not validated)
    """
    return text.replace(JSONP_PREFIX, "", 1).replace(";", "")


def render_raw_json(text: str) -> str:
    """
    Re-indent feed JSON with four spaces for display.

    The text is decoded and re-serialized, not re-indented token by token:
    escapes such as ``\\/`` are normalized, numbers are re-spelled, and of
    duplicate keys only the last survives. Good enough for inspection.

    Args:
        text: Bare JSON text

    Returns:
        Indented JSON, keys in their original order

    Raises:
        FeedParseError: If the text is not valid JSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FeedParseError("Trouble with json indent", str(e)) from e
    return json.dumps(data, indent=4, ensure_ascii=False)


class TumblrFeedClient:
    """
    Client for one blog's v1 JSON feed.

    Attributes:
        blog_url: Blog base URL without trailing slash
        timeout: Request timeout in seconds
        session: requests session used for every feed request

    Example:
        >>> with TumblrFeedClient("https://staff.tumblr.com") as client:
        ...     page = client.get_page(1, quiet=True)
        ...     print(page.total_posts)
    """

    REQUEST_TIMEOUT = 30  # seconds
    USER_AGENT = "TumblrDownload/0.1"

    def __init__(
        self,
        blog_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ) -> None:
        """
        Initialize the feed client.

        Args:
            blog_url: Blog base URL, trailing slash allowed
            session: Optional pre-configured session
            timeout: Request timeout in seconds (default REQUEST_TIMEOUT)

        Raises:
            ValueError: If blog_url is empty
        """
        if not blog_url or not blog_url.strip():
            raise ValueError("Blog URL cannot be empty")

        self.blog_url = normalize_blog_url(blog_url)
        self.timeout = timeout if timeout is not None else self.REQUEST_TIMEOUT
        self.session = session or self._create_session()

        logger.debug(f"Initialized TumblrFeedClient for {self.blog_url}")

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({'User-Agent': self.USER_AGENT})
        return session

    def feed_url(self, page: int = 1) -> str:
        """Return the feed URL for a page of this blog."""
        return build_feed_url(self.blog_url, page)

    def fetch_json(self, page: int = 1, quiet: bool = False) -> str:
        """
        Fetch one page of the feed and return its bare JSON text.

        Args:
            page: 1-based page number
            quiet: Suppress printing of the request URL

        Returns:
            The response body with the JSONP wrapper removed

        Raises:
            FeedFetchError: On any transport, read, or HTTP status failure
        """
        url = self.feed_url(page)

        if not quiet:
            print("REST Request url: ", url)
        logger.debug(f"Fetching feed page {page}: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except RequestException as e:
            logger.debug(f"Feed request to {url} failed: {e}")
            raise FeedFetchError("Trouble making REST GET request", str(e), url=url) from e

        try:
            response.raise_for_status()
            text = response.text
        except RequestException as e:
            status = getattr(response, "status_code", None)
            logger.debug(f"Feed response from {url} unusable: {e}")
            raise FeedFetchError(
                "Trouble reading JSON response body", str(e), url=url, status_code=status
            ) from e

        logger.debug(f"Fetched {len(text)} characters from {url}")
        return strip_jsonp(text)

    def get_page(self, page: int = 1, quiet: bool = False) -> FeedPage:
        """
        Fetch and decode one page of the feed.

        Args:
            page: 1-based page number
            quiet: Suppress printing of the request URL

        Returns:
            The decoded page (empty if the body was not decodable)

        Raises:
            FeedFetchError: If the request fails
        """
        return FeedPage.from_json(self.fetch_json(page, quiet=quiet))

    def close(self) -> None:
        """Close the underlying session."""
        if self.session:
            self.session.close()
            logger.debug(f"Closed session for {self.blog_url}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
