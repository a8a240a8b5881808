"""
Configuration for the NFL cap scraper.
"""
from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


@dataclass(frozen=True)
class Settings:
    """Immutable settings from environment."""

    base_url: str = os.getenv('BASE_URL', 'https://www.spotrac.com')
    user_agent: str = os.getenv('USER_AGENT', DEFAULT_USER_AGENT)
    season_start: int = int(os.getenv('SEASON_START', '2011'))
    season_end: int = int(os.getenv('SEASON_END', '2024'))
    output_file: str = os.getenv('OUTPUT_FILE', 'data/team_cap_2011_2024.csv')
    request_delay: float = float(os.getenv('REQUEST_DELAY', '1'))


settings = Settings()
