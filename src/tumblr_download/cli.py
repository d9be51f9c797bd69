"""
Command-line interface for Tumblr Download.

Downloads the photos on one page of a blog's feed, on every page (-all), or
dumps the feed JSON for inspection (-raw). Any fetch or write error aborts
the whole run.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api_client import TumblrFeedClient, normalize_blog_url, render_raw_json
from .downloader import PhotoDownloader
from .exceptions import TumblrDownloadError
from .pagination import download_all_pages
from .utils import setup_logging


logger = logging.getLogger('tumblr_download')


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description='Download the photos from a Tumblr blog page',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pictures are saved to the current working directory.

Examples:
  # Download the photos on the first page of a blog
  %(prog)s http://jnightscape.tumblr.com

  # Download the 2nd page of photos
  %(prog)s -page 2 http://jnightscape.tumblr.com

  # Examine the raw JSON returned by the feed (helpful for debugging)
  %(prog)s -raw http://jnightscape.tumblr.com
        """
    )

    parser.add_argument(
        '-page', '--page',
        type=int,
        default=1,
        help='blog page to download (default: 1)'
    )

    parser.add_argument(
        '-raw', '--raw',
        action='store_true',
        help='dump raw json output for debugging'
    )

    parser.add_argument(
        '-all', '--all',
        action='store_true',
        help='download images from all pages'
    )

    parser.add_argument(
        '-verbose', '--verbose',
        action='store_true',
        help='enable verbose debug logging'
    )

    parser.add_argument(
        'url',
        nargs='?',
        default='',
        help='blog URL, e.g. http://myblog.tumblr.com'
    )

    return parser


def parse_arguments(
    argv: Optional[List[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None
) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])
        parser: Parser to use (default: a new one from build_parser)

    Returns:
        Parsed argument namespace, with the trailing slash removed from url
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    args.url = normalize_blog_url(args.url)
    return args


def print_usage_error(prog: str) -> None:
    print("Please supply a tumblr url!", file=sys.stderr)
    print(f"usage: {prog} [options] url", file=sys.stderr)


def show_raw(client: TumblrFeedClient, page: int) -> None:
    """Print one page of the feed as indented JSON."""
    contents = client.fetch_json(page)
    rendered = render_raw_json(contents)
    print("")
    print("---")
    print(rendered)


def download_single_page(client: TumblrFeedClient, downloader: PhotoDownloader, page: int) -> int:
    """
    Download the photos on one page, listing each post as it goes.

    Returns:
        Number of files written
    """
    feed_page = client.get_page(page)
    print("Blog Title: ", feed_page.blog.title or "")
    print("Number of Posts: ", feed_page.total_posts or 0)
    written = downloader.download_page(feed_page)
    logger.info(f"Saved {written} photo(s) from page {page}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success or missing URL, non-zero for failure)
    """
    parser = build_parser()
    args = parse_arguments(argv, parser)

    setup_logging(verbose=args.verbose)

    if not args.url:
        print_usage_error(parser.prog)
        return 0

    # -all ignores -page unless -raw is also given
    if (args.raw or not args.all) and args.page < 1:
        logger.error(f"Invalid page number: {args.page}")
        return 1

    try:
        with TumblrFeedClient(args.url) as client:
            if args.raw:
                show_raw(client, args.page)
                return 0

            with PhotoDownloader() as downloader:
                if args.all:
                    result = download_all_pages(client, downloader)
                    print(result.summary())
                else:
                    download_single_page(client, downloader, args.page)

        return 0

    except TumblrDownloadError as e:
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        print("\n\nDownload interrupted by user")
        logger.info("Download interrupted by KeyboardInterrupt")
        return 130


if __name__ == '__main__':
    sys.exit(main())
