"""Shared fixtures: an in-memory store standing in for PostgreSQL."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from footballbin_mcp.config import Settings
from footballbin_mcp.models import Match, MatchweekPointer

KICKOFF = datetime(2025, 9, 13, 14, 0, tzinfo=timezone.utc)


class InMemoryStore:
    def __init__(self, matches: list[dict] | None = None, pointers: list[dict] | None = None):
        self.match_rows = matches or []
        self.pointer_rows = pointers or []
        self.league_queries: list[str] = []

    async def current_matchweeks(self) -> list[MatchweekPointer]:
        return [MatchweekPointer.from_record(r) for r in self.pointer_rows if r.get("is_current")]

    async def matches_by_league(self, league: str) -> list[Match]:
        self.league_queries.append(league)
        return [Match.from_record(r) for r in self.match_rows if r["league"] == league]


class BrokenStore:
    async def current_matchweeks(self) -> list[MatchweekPointer]:
        raise ConnectionError("database unavailable")

    async def matches_by_league(self, league: str) -> list[Match]:
        raise ConnectionError("database unavailable")


def match_row(match_id: str, home: str, away: str, kickoff: datetime, matchweek: int = 4, **extra) -> dict:
    row = {
        "league": "premier_league",
        "match_id": match_id,
        "matchweek": matchweek,
        "home_club_id": home,
        "away_club_id": away,
        "kickoff_time": kickoff.isoformat().replace("+00:00", "Z"),
        "predictions": {"ht_result": "1-0", "ft_result": "2-1"},
    }
    row.update(extra)
    return row


@pytest.fixture
def settings() -> Settings:
    return Settings(display_timezone="UTC", app_store_link="https://example.com/app")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(
        matches=[
            match_row("pl-4-3", "man_utd", "chelsea", KICKOFF + timedelta(hours=2)),
            match_row("pl-4-1", "arsenal", "nottm_forest", KICKOFF),
            match_row("pl-4-2", "man_city", "man_utd", KICKOFF + timedelta(hours=1)),
            match_row(
                "pl-4-4",
                "tottenham",
                "wolves",
                KICKOFF + timedelta(days=1),
                predictions=[{"type": "corner_count", "value": "9", "confidence": 80}],
                key_players=[{"player_id": "p10", "player_name": "Son", "reason": "In form"}],
            ),
            match_row("pl-5-1", "chelsea", "arsenal", KICKOFF + timedelta(days=7), matchweek=5),
            {
                **match_row("cl-1-1", "real_madrid", "bayern", KICKOFF),
                "league": "champions_league",
                "matchweek": 1,
            },
        ],
        pointers=[
            {"league": "premier_league", "matchweek_number": 3, "is_current": False},
            {"league": "premier_league", "matchweek_number": 4, "is_current": True},
            {"league": "champions_league", "matchweek_number": 1, "is_current": True},
        ],
    )


@pytest.fixture
def broken_store() -> BrokenStore:
    return BrokenStore()
