"""Domain records and the store boundary.

Rows coming out of the store are loose dicts. They are turned into these
dataclasses here, so nothing past this module deals with the two shapes
the ``predictions`` column can take.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from footballbin_mcp.errors import InvalidArguments
from footballbin_mcp.timefmt import parse_kickoff


@dataclass(frozen=True)
class Prediction:
    """One prediction; ``confidence`` is None when the source had none."""
    type: str
    value: Any
    confidence: int | float | str | None = None


@dataclass(frozen=True)
class KeyPlayer:
    player_id: str
    player_name: str
    reason: str


def _decode_json(raw: Any) -> Any:
    # asyncpg hands json/jsonb columns back as text
    if isinstance(raw, (str, bytes)):
        return json.loads(raw)
    return raw


def _value(raw: Any) -> Any:
    return "" if raw is None else raw


def parse_predictions(raw: Any) -> list[Prediction]:
    """Normalize the mapping form and the sequence form into one list."""
    raw = _decode_json(raw)
    if not raw:
        return []

    # Mapping form: {"ht_result": "1-0", ...}
    if isinstance(raw, Mapping):
        return [Prediction(type=str(k), value=_value(v)) for k, v in raw.items()]

    # Sequence form: [{"type": ..., "value": ..., "confidence": ...}, ...]
    predictions = []
    for item in raw:
        confidence = item.get("confidence")
        predictions.append(
            Prediction(
                type=str(item.get("type", "")),
                value=_value(item.get("value")),
                confidence=confidence or None,
            )
        )
    return predictions


def parse_key_players(raw: Any) -> list[KeyPlayer]:
    raw = _decode_json(raw) or []
    return [
        KeyPlayer(
            player_id=str(kp.get("player_id", "")),
            player_name=str(kp.get("player_name", "")),
            reason=str(kp.get("reason", "")),
        )
        for kp in raw
    ]


@dataclass(frozen=True)
class Match:
    league: str
    match_id: str
    matchweek: int
    home_club_id: str
    away_club_id: str
    kickoff_time: str
    kickoff: datetime
    predictions: list[Prediction] = field(default_factory=list)
    key_players: list[KeyPlayer] = field(default_factory=list)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Match:
        raw_kickoff = record["kickoff_time"]
        kickoff = parse_kickoff(raw_kickoff)
        return cls(
            league=record["league"],
            match_id=str(record["match_id"]),
            matchweek=int(record["matchweek"]),
            home_club_id=record["home_club_id"],
            away_club_id=record["away_club_id"],
            kickoff_time=raw_kickoff if isinstance(raw_kickoff, str) else kickoff.isoformat(),
            kickoff=kickoff,
            predictions=parse_predictions(record.get("predictions")),
            key_players=parse_key_players(record.get("key_players")),
        )


@dataclass(frozen=True)
class MatchweekPointer:
    league: str
    matchweek_number: int
    is_current: bool

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> MatchweekPointer:
        return cls(
            league=record["league"],
            matchweek_number=int(record["matchweek_number"]),
            is_current=bool(record.get("is_current", False)),
        )


@dataclass
class ResolvedMatch:
    """A match shaped for the tool result."""
    match_id: str
    home_team: str
    away_team: str
    kickoff_time: str
    kickoff_formatted: str
    countdown: str
    status: str
    predictions: list[dict[str, Any]]
    key_players: list[dict[str, str]]


def _optional_str(arguments: Mapping[str, Any], key: str) -> str | None:
    value = arguments.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidArguments(f"{key} must be a string")
    return value


def _optional_matchweek(value: Any) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidArguments("matchweek must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise InvalidArguments(f"matchweek must be a whole number, got {value!r}")


@dataclass(frozen=True)
class ToolCallInput:
    league: str
    matchweek: int | None = None
    home_team: str | None = None
    away_team: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> ToolCallInput:
        """Validate untrusted ``tools/call`` arguments."""
        if not isinstance(arguments, Mapping):
            raise InvalidArguments("arguments must be an object")
        league = arguments.get("league")
        if not isinstance(league, str) or not league.strip():
            raise InvalidArguments("league is required")
        return cls(
            league=league,
            matchweek=_optional_matchweek(arguments.get("matchweek")),
            home_team=_optional_str(arguments, "home_team"),
            away_team=_optional_str(arguments, "away_team"),
        )
