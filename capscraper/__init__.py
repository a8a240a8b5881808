"""
capscraper - NFL team salary cap scraper.

- Scrapes Spotrac team cap tables 2011-2024, one season at a time
- Cleans them into one row per (year, team)
- Outputs: CSV for downstream analysis
"""

__version__ = '1.0.0'

from capscraper.clean import SchemaError, clean_cap_data
from capscraper.models import TeamCapRecord
from capscraper.normalize import clean_currency, extract_team_code, normalize_header
from capscraper.scraper import CapScraper

__all__ = [
    'CapScraper',
    'TeamCapRecord',
    'SchemaError',
    'clean_cap_data',
    'clean_currency',
    'extract_team_code',
    'normalize_header',
]
