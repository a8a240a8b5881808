"""
Text normalization for scraped cap tables.

Converts currency strings, multi-line headers and team cells to clean values.
"""

import re

import numpy as np
import pandas as pd

# =============================================================================
# CURRENCY
# =============================================================================

_CURRENCY_STRIP = re.compile(r'[$M,]')
_DOLLAR_STRIP = r'[$,]'


def clean_currency(value) -> float:
    """
    Convert a cap-dollar string to a number.

    Strips '$', 'M' and ',' without scaling, so "$10.5M" becomes 10.5
    and "$1,234,567" becomes 1234567.0.

    Args:
        value: Raw cell text (or an already numeric value)

    Returns:
        Parsed float, or nan if the value does not parse
    """
    if value is None:
        return np.nan
    if isinstance(value, (int, float)):
        return float(value)
    text = _CURRENCY_STRIP.sub('', str(value)).strip()
    try:
        return float(text)
    except ValueError:
        return np.nan


def parse_dollars(series: pd.Series) -> pd.Series:
    """
    Parse a column of dollar strings, stripping only '$' and ','.

    Unlike clean_currency the 'M' suffix is left in place, so such cells
    come out as NaN.
    """
    text = series.astype(str).str.replace(_DOLLAR_STRIP, '', regex=True)
    return pd.to_numeric(text.str.strip(), errors='coerce').astype(float)


# =============================================================================
# HEADERS AND TEAMS
# =============================================================================

_TEAM_CODE = re.compile(r'^[A-Z]{2,3}')


def normalize_header(name) -> str:
    """Replace line breaks with spaces, collapse whitespace runs and trim."""
    s = str(name).replace('\r\n', ' ').replace('\n', ' ')
    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def extract_team_code(s) -> str | None:
    """
    Extract the leading 2-3 uppercase letter team code.

    "KC Kansas City Chiefs" -> "KC"; returns None when there is no code.
    """
    if s is None or (isinstance(s, float) and np.isnan(s)):
        return None
    match = _TEAM_CODE.match(str(s).strip())
    return match.group(0) if match else None
