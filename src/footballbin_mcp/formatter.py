"""Shape resolved matches into the tool result."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, tzinfo
from typing import Any

from footballbin_mcp.config import Settings, get_settings
from footballbin_mcp.models import Match, Prediction, ResolvedMatch, parse_predictions
from footballbin_mcp.resolver import Resolution
from footballbin_mcp.timefmt import format_countdown, format_match_date, get_match_status

DEFAULT_CONFIDENCE = 75

PREDICTION_TYPES = {
    "ht_result": "Half Time Result",
    "ft_result": "Full Time Result",
    "next_goal": "Next Goal",
    "corner_count": "Corner Count",
}

APP_NOTE = "Download FootballBin for live match tracking, player valuations, and detailed predictions."


def format_club_id(club_id: str) -> str:
    """``man_utd`` -> ``Man Utd``."""
    return " ".join(w[:1].upper() + w[1:] for w in club_id.split("_"))


def format_prediction_type(code: str) -> str:
    return PREDICTION_TYPES.get(code, code)


def format_predictions(predictions: list[Prediction] | Any) -> list[dict[str, Any]]:
    """Display-ready predictions. Raw mapping or sequence payloads are accepted too."""
    if not isinstance(predictions, list) or not all(isinstance(p, Prediction) for p in predictions):
        predictions = parse_predictions(predictions)
    return [
        {
            "type": format_prediction_type(p.type),
            "value": p.value,
            "confidence": p.confidence or DEFAULT_CONFIDENCE,
        }
        for p in predictions
    ]


def format_match(match: Match, now: datetime, tz: tzinfo | None = None) -> ResolvedMatch:
    return ResolvedMatch(
        match_id=match.match_id,
        home_team=format_club_id(match.home_club_id),
        away_team=format_club_id(match.away_club_id),
        kickoff_time=match.kickoff_time,
        kickoff_formatted=format_match_date(match.kickoff, tz),
        countdown=format_countdown(match.kickoff, now),
        status=get_match_status(match.kickoff, now),
        predictions=format_predictions(match.predictions),
        key_players=[asdict(kp) for kp in match.key_players],
    )


def build_tool_result(
    resolution: Resolution,
    now: datetime,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """The ``structuredContent`` payload of a successful tool call."""
    settings = settings or get_settings()
    matches = [asdict(format_match(m, now, settings.display_tz)) for m in resolution.matches]
    return {
        "league": resolution.league,
        "matchweek": resolution.matchweek,
        "matches": matches,
        "count": len(matches),
        "app_link": settings.app_store_link,
        "note": APP_NOTE,
    }
