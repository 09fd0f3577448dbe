"""Turn a tool call into the sorted list of matches it asks for."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from footballbin_mcp.aliases import normalize_league, normalize_team_name
from footballbin_mcp.errors import NotFound
from footballbin_mcp.models import Match, MatchweekPointer, ToolCallInput

logger = logging.getLogger(__name__)


class Store(Protocol):
    async def current_matchweeks(self) -> list[MatchweekPointer]: ...

    async def matches_by_league(self, league: str) -> list[Match]: ...


@dataclass
class Resolution:
    league: str
    matchweek: int
    matches: list[Match]


def select_current_matchweek(pointers: list[MatchweekPointer], league: str) -> int | None:
    """First current pointer for ``league``; the store's order breaks ties."""
    pointer = next((p for p in pointers if p.is_current and p.league == league), None)
    return pointer.matchweek_number if pointer else None


def _club_matches(club_id: str, team_filter: str) -> bool:
    club = club_id.lower()
    return club == team_filter or team_filter in club


def filter_matches(
    matches: list[Match],
    matchweek: int,
    home_team: str | None = None,
    away_team: str | None = None,
) -> list[Match]:
    """Keep one matchweek, apply team filters, sort by kickoff (stable)."""
    selected = [m for m in matches if m.matchweek == matchweek]

    if home_team:
        home = normalize_team_name(home_team)
        selected = [m for m in selected if _club_matches(m.home_club_id, home)]
    if away_team:
        away = normalize_team_name(away_team)
        selected = [m for m in selected if _club_matches(m.away_club_id, away)]

    return sorted(selected, key=lambda m: m.kickoff)


async def resolve_matches(store: Store, tool_input: ToolCallInput) -> Resolution:
    league = normalize_league(tool_input.league)

    matchweek = tool_input.matchweek
    if not matchweek:
        matchweek = select_current_matchweek(await store.current_matchweeks(), league)
        if matchweek is None:
            raise NotFound(f"no current matchweek for {league}")
        logger.debug(f"Current matchweek for {league} is {matchweek}")

    matches = filter_matches(
        await store.matches_by_league(league),
        matchweek,
        home_team=tool_input.home_team,
        away_team=tool_input.away_team,
    )
    if not matches:
        raise NotFound(f"no matches for {league} matchweek {matchweek}")

    return Resolution(league=league, matchweek=matchweek, matches=matches)
