"""
Utility functions for Tumblr Download.
"""

import logging


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        verbose: If True, set logging level to DEBUG; otherwise INFO

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger('tumblr_download')

    # Avoid adding multiple handlers if logging is setup multiple times
    if logger.handlers:
        logger.handlers.clear()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Console handler writes to stderr, leaving stdout for program output
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Format: timestamp - level - message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
