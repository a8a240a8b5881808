"""
Combine and clean scraped season tables into team cap records.
"""
import logging
from typing import Mapping

import pandas as pd
from pydantic import ValidationError

from capscraper.models import AGGREGATE_LABELS, TeamCapRecord
from capscraper.normalize import extract_team_code, normalize_header, parse_dollars

logger = logging.getLogger('capscraper')

# Normalized source header -> output column
COLUMN_MAP: dict[str, str] = {
    'Total Cap Allocations': 'Total_Cap',
    'Cap Space All': 'Cap_Space',
    'Active 53-Man': 'Active',
    'Reserves IR/PUP/NFI/SUSP': 'Reserves',
    'Dead Cap': 'Dead',
}

NUMERIC_COLUMNS = list(COLUMN_MAP.values())
OUTPUT_COLUMNS = ['Year', 'Team'] + NUMERIC_COLUMNS

# TeamCapRecord field -> output column
RECORD_COLUMNS: dict[str, str] = {
    'year': 'Year',
    'team': 'Team',
    'total_cap': 'Total_Cap',
    'cap_space': 'Cap_Space',
    'active': 'Active',
    'reserves': 'Reserves',
    'dead': 'Dead',
}


class SchemaError(ValueError):
    """Expected column missing from the scraped table."""
    pass


def combine_years(tables: Mapping[int, pd.DataFrame]) -> pd.DataFrame:
    """Concatenate season tables in ascending year order."""
    frames = [tables[year] for year in sorted(tables)]
    if not frames:
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Collapse multi-line, padded headers to single-spaced names."""
    out = df.copy()
    out.columns = [normalize_header(c) for c in df.columns]
    return out


def select_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Select and rename the columns of interest.

    Raises:
        SchemaError: if any expected header is absent
    """
    expected = ['Year', 'Team'] + list(COLUMN_MAP)
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise SchemaError(f'Missing expected columns: {missing}')
    return df[expected].rename(columns=COLUMN_MAP)


def drop_aggregate_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Remove Totals/Averages footer rows."""
    team = df['Team'].astype(str).str.strip()
    return df[~team.isin(AGGREGATE_LABELS)]


def validate_records(df: pd.DataFrame) -> list[TeamCapRecord]:
    """Validate cleaned rows through TeamCapRecord."""
    records = []
    for row in df.to_dict('records'):
        records.append(TeamCapRecord(
            year=int(row['Year']),
            team=row['Team'],
            total_cap=row['Total_Cap'],
            cap_space=row['Cap_Space'],
            active=row['Active'],
            reserves=row['Reserves'],
            dead=row['Dead'],
        ))
    return records


def records_to_frame(records: list[TeamCapRecord]) -> pd.DataFrame:
    """Build the output dataset from validated records."""
    df = pd.DataFrame([r.model_dump() for r in records], columns=list(RECORD_COLUMNS))
    df = df.rename(columns=RECORD_COLUMNS)
    return df.astype({'Year': int, **{c: float for c in NUMERIC_COLUMNS}})


def clean_cap_data(tables: Mapping[int, pd.DataFrame]) -> pd.DataFrame:
    """
    Build the team cap dataset from raw season tables.

    Args:
        tables: Mapping of year -> raw scraped table

    Returns:
        DataFrame with columns Year, Team, Total_Cap, Cap_Space, Active,
        Reserves, Dead

    Raises:
        SchemaError: if the source table layout changed
    """
    combined = combine_years(tables)
    if combined.empty:
        return pd.DataFrame(columns=OUTPUT_COLUMNS)

    df = normalize_columns(combined)
    try:
        df = select_columns(df)
    except SchemaError as e:
        logger.error(f'Schema drift: {e}')
        raise

    df = drop_aggregate_rows(df).copy()

    for col in NUMERIC_COLUMNS:
        df[col] = parse_dollars(df[col])

    df['Team'] = df['Team'].map(extract_team_code)
    no_code = df['Team'].isna()
    if no_code.any():
        logger.warning(f'Dropping {int(no_code.sum())} rows without a team code')
        df = df[~no_code].copy()

    df['Year'] = df['Year'].astype(int)
    df = df.reset_index(drop=True)

    dupes = df.duplicated(subset=['Year', 'Team'])
    if dupes.any():
        logger.warning(f'{int(dupes.sum())} duplicate (Year, Team) rows')

    try:
        records = validate_records(df)
    except ValidationError as e:
        logger.error(f'Invalid cap record: {e}')
        raise

    return records_to_frame(records)
