"""
Entry point for running tumblr_download as a module.

This allows the package to be executed directly using:
    python -m tumblr_download -page 2 https://myblog.tumblr.com
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
