"""
Exception hierarchy for the Tumblr downloader.

Components raise these instead of exiting; the CLI is the only place that
turns an error into a non-zero exit status.
"""

from typing import Optional


class TumblrDownloadError(Exception):
    """
    Base exception for all Tumblr downloader errors.
    """

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize the exception.

        Args:
            message: Primary error message
            details: Additional details or context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class FeedError(TumblrDownloadError):
    """Raised for any problem obtaining or reading the blog feed."""
    pass


class FeedFetchError(FeedError):
    """
    Raised when the feed request fails.

    Examples:
        - Connection refused or DNS failure
        - Connection dropped while reading the body
        - Non-2xx HTTP status
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class FeedParseError(FeedError):
    """Raised when feed text has to be valid JSON and is not."""
    pass


class DownloadError(TumblrDownloadError):
    """
    Raised when a photo cannot be downloaded or saved.

    Examples:
        - Photo URL has no final path segment to name the file after
        - Network failure fetching the photo
        - File cannot be written
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        url: Optional[str] = None
    ):
        super().__init__(message, details)
        self.url = url
