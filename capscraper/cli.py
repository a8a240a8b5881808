"""
CLI entrypoints for the NFL cap scraper.

Usage:
    python -m capscraper.cli season 2023
    python -m capscraper.cli historical 2011 2024 --output data/team_cap_2011_2024.csv
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from capscraper.clean import SchemaError, clean_cap_data
from capscraper.config import settings
from capscraper.export import log_summary, summarize, to_csv
from capscraper.pacing import FixedDelay
from capscraper.scraper import CapScraper, log_event

logger = logging.getLogger('capscraper')


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def run_years(
    years,
    output: str | None = None,
    delay: float | None = None,
    export: bool = True,
    scraper: CapScraper | None = None,
    pacer=None,
) -> int:
    """
    Scrape, clean and export a range of seasons.

    Returns:
        Number of team rows produced
    """
    years = list(years)
    output = output or settings.output_file
    if pacer is None:
        pacer = FixedDelay(settings.request_delay if delay is None else delay)

    logger.info(f'Starting Spotrac scrape for years {min(years)} - {max(years)}')
    logger.info('=' * 50)

    owns_scraper = scraper is None
    scraper = scraper or CapScraper()
    try:
        tables = scraper.scrape_years(years, pacer=pacer)
    finally:
        if owns_scraper:
            scraper.close()

    logger.info('=' * 50)
    logger.info('Scraping complete. Processing data...')

    if not tables:
        logger.error('No seasons scraped')
        return 0

    df = clean_cap_data(tables)

    if export:
        path = to_csv(df, output)
        log_summary(summarize(df), path)
        log_event(event='export_done', path=path, rows=len(df))

    return len(df)


def main(argv=None):
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog='capscraper',
        description='NFL team salary cap scraper',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Season command
    season_parser = subparsers.add_parser('season', help='Scrape a single season')
    season_parser.add_argument('year', type=int, help='Season year')

    # Historical command
    hist_parser = subparsers.add_parser('historical', help='Scrape multiple seasons')
    hist_parser.add_argument('start_year', type=int, nargs='?', default=settings.season_start,
                             help=f'Start year (default {settings.season_start})')
    hist_parser.add_argument('end_year', type=int, nargs='?', default=settings.season_end,
                             help=f'End year, inclusive (default {settings.season_end})')

    for sub in (season_parser, hist_parser):
        sub.add_argument('--output', default=settings.output_file, help='Output CSV path')
        sub.add_argument('--delay', type=float, default=settings.request_delay,
                         help='Seconds to wait between requests')
        sub.add_argument('--no-export', action='store_true', help='Skip CSV export')

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.delay < 0:
        parser.error('--delay must be >= 0')

    if args.command == 'season':
        years = [args.year]
    else:
        if args.end_year < args.start_year:
            parser.error('end_year must be >= start_year')
        years = range(args.start_year, args.end_year + 1)

    try:
        count = run_years(
            years,
            output=args.output,
            delay=args.delay,
            export=not args.no_export,
        )
    except SchemaError as e:
        logger.error(f'Aborting: {e}')
        sys.exit(1)
    except ValidationError as e:
        logger.error(f'Aborting, invalid cap record: {e}')
        sys.exit(1)
    except OSError as e:
        logger.error(f'Aborting, cannot write output: {e}')
        sys.exit(1)

    print(f'Scraped {min(years)}-{max(years)}: {count} team rows')
    sys.exit(0 if count > 0 else 1)


if __name__ == '__main__':
    main()
