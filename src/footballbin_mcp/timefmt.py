"""Kickoff formatting: display date, countdown and match status.

Every function that depends on the clock takes ``now`` explicitly; the
transport reads the clock once per request.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Literal

from dateutil import parser as dateparser

MatchStatus = Literal["scheduled", "live", "finished"]

# Typical match length plus stoppage time
LIVE_WINDOW = timedelta(hours=2)

DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def parse_kickoff(value: str | datetime) -> datetime:
    """Parse a stored kickoff into an aware datetime (naive values are UTC)."""
    dt = value if isinstance(value, datetime) else dateparser.parse(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_match_date(kickoff: datetime, tz: tzinfo | None = None) -> str:
    """Render e.g. ``Sat 14 Sep 15:00`` in ``tz``, or the local zone when None."""
    local = kickoff.astimezone(tz)
    return f"{DAYS[local.weekday()]} {local.day} {MONTHS[local.month - 1]} {local:%H:%M}"


def format_countdown(kickoff: datetime, now: datetime) -> str:
    """Time until kickoff in its two coarsest units, or ``now`` once started."""
    remaining = kickoff - now
    if remaining <= timedelta(0):
        return "now"

    minutes = int(remaining.total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}d {hours % 24}h"
    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    return f"{minutes}m"


def get_match_status(kickoff: datetime, now: datetime) -> MatchStatus:
    if now < kickoff:
        return "scheduled"
    if now < kickoff + LIVE_WINDOW:
        return "live"
    return "finished"
