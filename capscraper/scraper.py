"""
Spotrac NFL team cap scraper.

URL pattern: https://www.spotrac.com/nfl/cap/_/year/{year}
"""
import json
import logging
import time

import httpx
import pandas as pd
from bs4 import BeautifulSoup

from capscraper.config import settings
from capscraper.pacing import FixedDelay

logger = logging.getLogger('capscraper')


def log_event(**kv):
    """Emit structured JSON log line."""
    print(json.dumps(kv, separators=(',', ':')))


class CapScraper:
    """
    Team salary cap scraper.

    Fetches one page per season, strictly one at a time, pausing between
    requests according to the pacing policy.
    """

    def __init__(self, client: httpx.Client | None = None, base_url: str | None = None):
        self.base_url = (base_url or settings.base_url).rstrip('/')
        self.client = client or httpx.Client(
            follow_redirects=True,
            headers={'User-Agent': settings.user_agent},
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        self.client.close()

    def _year_url(self, year: int) -> str:
        """Build season cap table URL."""
        return f'{self.base_url}/nfl/cap/_/year/{year}'

    def fetch_year(self, year: int) -> httpx.Response | None:
        """
        Fetch the cap page for one season.

        Returns:
            The response, or None on any HTTP error
        """
        url = self._year_url(year)
        start = time.time()
        try:
            response = self.client.get(url, headers={'User-Agent': settings.user_agent})
            elapsed_ms = int((time.time() - start) * 1000)
            log_event(event='fetch', url=url, status=response.status_code, ms=elapsed_ms)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f'HTTP error for year {year}: {e}')
            return None
        return response

    def extract_table(self, html: str, year: int) -> pd.DataFrame | None:
        """
        Parse the first table on the page into a DataFrame.

        Header pieces (split by <br> or nested tags on the site) are joined
        with line breaks and left for the cleaner to normalize; body cell
        pieces are joined with spaces. Ragged rows are padded or truncated
        to the header width.

        Returns:
            Table with an added Year column, or None if there is no table
        """
        soup = BeautifulSoup(html, 'lxml')
        table = soup.find('table')
        if table is None:
            logger.warning(f'No table found for year {year}')
            return None

        rows = table.find_all('tr')
        if not rows:
            logger.warning(f'No table found for year {year}')
            return None

        header_row = rows[0]
        headers = [cell.get_text('\n') for cell in header_row.find_all(['th', 'td'])]
        width = len(headers)

        records: list[list[str | None]] = []
        for tr in rows[1:]:
            if tr.find_parent('thead') is not None:
                continue
            cells = [cell.get_text(' ', strip=True) for cell in tr.find_all(['th', 'td'])]
            if not cells:
                continue
            cells = cells[:width] + [None] * (width - len(cells))
            records.append(cells)

        df = pd.DataFrame(records, columns=headers)
        df['Year'] = year
        return df

    def scrape_year(self, year: int) -> pd.DataFrame | None:
        """Fetch and extract a single season."""
        response = self.fetch_year(year)
        if response is None:
            return None
        return self.extract_table(response.text, year)

    def scrape_years(self, years, pacer=None) -> dict[int, pd.DataFrame]:
        """
        Scrape multiple seasons sequentially.

        Args:
            years: Seasons to scrape, in order
            pacer: Pacing policy called after every attempt
                (defaults to FixedDelay(settings.request_delay))

        Returns:
            Ordered mapping of year -> raw table for successful seasons
        """
        pacer = pacer or FixedDelay(settings.request_delay)
        tables: dict[int, pd.DataFrame] = {}

        for year in years:
            df = self.scrape_year(year)
            if df is not None:
                tables[year] = df
                logger.info(f'Scraping {year} ... Success!')
                log_event(event='season_complete', season=year, rows=len(df))
            else:
                logger.info(f'Scraping {year} ... Failed')
                log_event(event='season_failed', season=year)

            pacer.wait()

        return tables
