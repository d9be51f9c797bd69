"""Photo downloader for Tumblr Download.

Fetches the image behind each photo post and writes it into an output
directory (the current working directory unless told otherwise), named after
the last segment of the photo URL.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import requests
from requests.exceptions import RequestException

from .exceptions import DownloadError
from .models import FeedPage, Post


logger = logging.getLogger(__name__)


def filename_from_url(url: Optional[str]) -> str:
    """Derive a local filename from a photo URL.

    The filename is everything after the last ``/``; query strings are not
    treated specially.

    Args:
        url: Photo URL.

    Returns:
        Final path segment of the URL.

    Raises:
        DownloadError: If the URL has no final segment to use.
    """
    filename = (url or "").rsplit("/", 1)[-1]
    if not filename:
        raise DownloadError("Trouble deriving file name", url or "<empty url>", url=url)
    return filename


class PhotoDownloader:
    """Downloads photo post images, one at a time.

    Files with the same name are overwritten without warning.

    Attributes:
        output_dir: Directory files are written to.
        timeout: Request timeout in seconds.
        session: requests session used for every download.
    """

    REQUEST_TIMEOUT = 30  # seconds
    CHUNK_SIZE = 8192

    def __init__(
        self,
        output_dir: Optional[Union[str, Path]] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        """Initialize the downloader.

        Args:
            output_dir: Directory to write files into (default: current
                working directory).
            session: Optional pre-configured session.
            timeout: Request timeout in seconds.
        """
        self.output_dir = Path(output_dir) if output_dir is not None else Path.cwd()
        self.timeout = timeout if timeout is not None else self.REQUEST_TIMEOUT
        self.session = session or requests.Session()

        logger.debug(f"PhotoDownloader writing to {self.output_dir}")

    def download_post(self, post: Post) -> Optional[Path]:
        """Download the photo of a single post.

        Args:
            post: Post from a feed page.

        Returns:
            Path of the written file, or None if the post is not a photo post.

        Raises:
            DownloadError: If the filename cannot be derived, the photo cannot
                be fetched, or the file cannot be written.
        """
        if not post.is_photo:
            logger.debug(f"Skipping post {post.id} (type: {post.post_type})")
            return None

        url = post.photo_url
        filename = filename_from_url(url)
        filepath = self.output_dir / filename

        logger.debug(f"Downloading {url} to {filepath}")

        try:
            response = self.session.get(url, timeout=self.timeout, stream=True)
        except RequestException as e:
            raise DownloadError("Trouble making GET photo request", str(e), url=url) from e

        bytes_downloaded = 0
        try:
            response.raise_for_status()
            with open(filepath, "wb") as f:
                for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        bytes_downloaded += len(chunk)
        except RequestException as e:
            raise DownloadError("Trouble reading response body", str(e), url=url) from e
        except OSError as e:
            raise DownloadError("Trouble creating file", str(e), url=url) from e
        finally:
            response.close()

        logger.info(f"Saved {filename} ({bytes_downloaded / 1024:.2f} KB)")
        return filepath

    def download_page(self, page: FeedPage, quiet: bool = False) -> int:
        """Download every photo on a feed page, in feed order.

        Args:
            page: Decoded feed page.
            quiet: Suppress the per-post progress listing.

        Returns:
            Number of files written.
        """
        written = 0
        for i, post in enumerate(page.posts):
            if not quiet:
                print("Post # ", i)
                print(" ---> Caption: ", post.caption or "")
                print(" ---> Url    : ", post.photo_url or "")
            if not post.is_photo:
                if not quiet:
                    print(" ---> SKIPPING (not photo post)")
                continue
            if self.download_post(post) is not None:
                written += 1
            if not quiet:
                print()
        return written

    def close(self) -> None:
        """Close the downloader and clean up resources."""
        if self.session:
            self.session.close()
            logger.debug("Downloader session closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"PhotoDownloader(output_dir={self.output_dir})"
