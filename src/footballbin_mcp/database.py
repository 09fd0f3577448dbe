"""PostgreSQL access using asyncpg.

Two read-only collections back the tool: matches (partitioned by league)
and matchweek pointers.
"""

import logging

import asyncpg

from footballbin_mcp.config import Settings, get_settings
from footballbin_mcp.models import Match, MatchweekPointer

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


async def init_db() -> None:
    """Initialize database connection pool."""
    global _pool
    settings = get_settings()
    _pool = await asyncpg.create_pool(settings.database_url, min_size=1, max_size=10)
    logger.info("Database pool ready")


async def close_db() -> None:
    """Close database connection pool."""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None


async def get_pool() -> asyncpg.Pool:
    """Get database pool."""
    if _pool is None:
        await init_db()
    return _pool


async def fetch_all(query: str, *args) -> list[dict]:
    """Execute query and return all rows as dicts."""
    pool = await get_pool()
    rows = await pool.fetch(query, *args)
    return [dict(r) for r in rows]


class MatchStore:
    """Lookups the query resolver needs from the two tables."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    async def current_matchweeks(self) -> list[MatchweekPointer]:
        rows = await fetch_all(f"""
            SELECT league, matchweek_number, is_current
            FROM {self.settings.matchweeks_table}
            WHERE is_current = true
        """)
        return [MatchweekPointer.from_record(r) for r in rows]

    async def matches_by_league(self, league: str) -> list[Match]:
        rows = await fetch_all(f"""
            SELECT league, match_id, matchweek, home_club_id, away_club_id,
                   kickoff_time, predictions, key_players
            FROM {self.settings.matches_table}
            WHERE league = $1
        """, league)
        return [Match.from_record(r) for r in rows]
