"""
Shared fixtures: synthetic Spotrac cap pages and a fake HTTP transport.
"""
import httpx
import pytest

TEAMS = [
    ('ARI', 'Arizona Cardinals'), ('ATL', 'Atlanta Falcons'), ('BAL', 'Baltimore Ravens'),
    ('BUF', 'Buffalo Bills'), ('CAR', 'Carolina Panthers'), ('CHI', 'Chicago Bears'),
    ('CIN', 'Cincinnati Bengals'), ('CLE', 'Cleveland Browns'), ('DAL', 'Dallas Cowboys'),
    ('DEN', 'Denver Broncos'), ('DET', 'Detroit Lions'), ('GB', 'Green Bay Packers'),
    ('HOU', 'Houston Texans'), ('IND', 'Indianapolis Colts'), ('JAX', 'Jacksonville Jaguars'),
    ('KC', 'Kansas City Chiefs'), ('LV', 'Las Vegas Raiders'), ('LAC', 'Los Angeles Chargers'),
    ('LAR', 'Los Angeles Rams'), ('MIA', 'Miami Dolphins'), ('MIN', 'Minnesota Vikings'),
    ('NE', 'New England Patriots'), ('NO', 'New Orleans Saints'), ('NYG', 'New York Giants'),
    ('NYJ', 'New York Jets'), ('PHI', 'Philadelphia Eagles'), ('PIT', 'Pittsburgh Steelers'),
    ('SF', 'San Francisco 49ers'), ('SEA', 'Seattle Seahawks'), ('TB', 'Tampa Bay Buccaneers'),
    ('TEN', 'Tennessee Titans'), ('WAS', 'Washington Commanders'),
]

HEADERS = [
    'Rank',
    'Team',
    'Total Cap\n            Allocations',
    'Cap Space\n            All',
    'Active\n            53-Man',
    'Reserves\n            IR/PUP/NFI/SUSP',
    'Dead\n            Cap',
]


def money(value: int) -> str:
    """Format dollars the way the site does: $1,234,567 / -$5,000,000."""
    sign = '-' if value < 0 else ''
    return f'{sign}${abs(value):,}'


def team_row(rank: int, code: str, name: str, cap_space: int | None = None) -> list[str]:
    total = 200_000_000 + rank * 1_000_000
    space = cap_space if cap_space is not None else 25_000_000 - rank * 100_000
    return [
        str(rank),
        f'{code}\n    {name}',
        money(total),
        money(space),
        money(150_000_000 + rank * 10_000),
        money(5_000_000),
        money(1_234_567),
    ]


def make_page(
    teams=TEAMS,
    headers=HEADERS,
    footer_labels=('Totals',),
    overrides: dict | None = None,
) -> str:
    """Render a cap page with one table, team rows and footer aggregate rows."""
    overrides = overrides or {}
    head = ''.join(f'<th>{h}</th>' for h in headers)
    body = []
    for i, (code, name) in enumerate(teams, start=1):
        cells = overrides.get(code) or team_row(i, code, name)
        body.append('<tr>' + ''.join(f'<td>{c}</td>' for c in cells) + '</tr>')
    foot = []
    for label in footer_labels:
        cells = ['', label] + [money(6_400_000_000)] * (len(headers) - 2)
        foot.append('<tr>' + ''.join(f'<td>{c}</td>' for c in cells) + '</tr>')
    return (
        '<html><body><h1>NFL Team Cap</h1>'
        f'<table><thead><tr>{head}</tr></thead>'
        f'<tbody>{"".join(body)}</tbody>'
        f'<tfoot>{"".join(foot)}</tfoot></table>'
        '</body></html>'
    )


class FakeSite:
    """Serves canned pages per year; unknown years get a 404."""

    def __init__(self, pages: dict[int, str | int]):
        self.pages = pages
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        year = int(request.url.path.rstrip('/').rsplit('/', 1)[-1])
        page = self.pages.get(year, 404)
        if isinstance(page, int):
            return httpx.Response(page, text='error')
        return httpx.Response(200, text=page)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture
def page_2023():
    return make_page()


def pytest_configure(config):
    config.addinivalue_line('markers', 'integration: hits the live site (set CAPSCRAPER_LIVE=1)')
