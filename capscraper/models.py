"""
Pydantic models for team cap records.
"""

import math
import re

from pydantic import BaseModel, field_validator

AGGREGATE_LABELS = ('Totals', 'Averages')

_TEAM_RE = re.compile(r'^[A-Z]{2,3}$')


class TeamCapRecord(BaseModel):
    """Validated team-season cap row (all amounts in dollars)."""

    year: int
    team: str
    total_cap: float | None = None
    cap_space: float | None = None
    active: float | None = None
    reserves: float | None = None
    dead: float | None = None

    @field_validator('year')
    @classmethod
    def year_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('year must be positive')
        return v

    @field_validator('team')
    @classmethod
    def team_code(cls, v: str) -> str:
        v = v.strip()
        if v in AGGREGATE_LABELS or not _TEAM_RE.match(v):
            raise ValueError(f'invalid team code: {v!r}')
        return v

    @field_validator('total_cap', 'cap_space', 'active', 'reserves', 'dead', mode='before')
    @classmethod
    def nan_to_none(cls, v):
        if isinstance(v, float) and math.isnan(v):
            return None
        return v

    @property
    def over_cap(self) -> bool:
        """Check if the team is over the cap (negative cap space)."""
        return self.cap_space is not None and self.cap_space < 0
