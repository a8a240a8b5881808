"""
Historical scrape CLI entrypoint.

Usage: python -m capscraper.historical 2011 2024
"""

import sys

from capscraper.cli import main

if __name__ == '__main__':
    # Insert 'historical' command
    sys.argv = [sys.argv[0], 'historical'] + sys.argv[1:]
    main()
