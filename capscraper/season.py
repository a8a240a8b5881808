"""
Season scrape CLI entrypoint.

Usage: python -m capscraper.season 2023
"""
import sys
from capscraper.cli import main

if __name__ == '__main__':
    # Insert 'season' command
    sys.argv = [sys.argv[0], 'season'] + sys.argv[1:]
    main()
