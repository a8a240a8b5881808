"""
CSV export module.

Writes the cleaned team cap dataset for downstream analysis.
"""
import logging
from pathlib import Path

import pandas as pd

from capscraper.clean import OUTPUT_COLUMNS

logger = logging.getLogger('capscraper')


def to_csv(df: pd.DataFrame, path: str) -> str:
    """
    Export team cap records to CSV.

    Creates the parent directory if needed and overwrites any existing file.

    Args:
        df: Cleaned dataset
        path: Output file path

    Returns:
        Path to output file
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df[OUTPUT_COLUMNS].to_csv(out_path, index=False, lineterminator='\n')
    return str(out_path)


def summarize(df: pd.DataFrame) -> dict:
    """Row count, year span and rows per year."""
    if df.empty:
        return {
            'rows': 0,
            'year_min': None,
            'year_max': None,
            'rows_by_year': {},
            'teams_per_year': [],
        }

    counts = df.groupby('Year').size()
    return {
        'rows': len(df),
        'year_min': int(df['Year'].min()),
        'year_max': int(df['Year'].max()),
        'rows_by_year': {int(y): int(n) for y, n in counts.items()},
        'teams_per_year': sorted({int(n) for n in counts}),
    }


def log_summary(summary: dict, path: str) -> None:
    """Print the end-of-run summary block."""
    logger.info(f'Data exported to: {path}')
    logger.info(f'Total rows: {summary["rows"]}')
    logger.info(f'Years covered: {summary["year_min"]} - {summary["year_max"]}')
    logger.info(f'Teams per year: {" ".join(str(n) for n in summary["teams_per_year"])}')
    short = {y: n for y, n in summary['rows_by_year'].items() if n < max(summary['teams_per_year'], default=0)}
    if short:
        logger.warning(f'Years with fewer rows than the rest: {short}')
