#!/usr/bin/env python3
"""
Quick health check for the cap scraper.

Scrapes one season live and checks the table still has the expected layout.

Usage:
    python -m tools.scraper_check --season 2024
"""
import argparse
import sys

from capscraper import CapScraper, SchemaError, clean_cap_data


def main():
    parser = argparse.ArgumentParser(description='Quick scraper health check')
    parser.add_argument('--season', type=int, default=2024)
    parser.add_argument('--min-teams', type=int, default=32)
    args = parser.parse_args()

    print(f'Health check: season {args.season}')

    with CapScraper() as scraper:
        raw = scraper.scrape_year(args.season)

    if raw is None:
        print('ERROR: No table returned from scraper')
        sys.exit(1)

    try:
        df = clean_cap_data({args.season: raw})
    except SchemaError as e:
        print(f'ERROR: {e}')
        sys.exit(1)

    if len(df) < args.min_teams:
        print(f'ERROR: only {len(df)} teams (expected {args.min_teams})')
        sys.exit(1)

    for row in df.head(3).to_dict('records'):
        print(f'  {row["Team"]}: total={row["Total_Cap"]:,.0f} space={row["Cap_Space"]:,.0f} dead={row["Dead"]:,.0f}')

    print(f'\nHealth check passed ({len(df)} teams)')
    sys.exit(0)


if __name__ == '__main__':
    main()
