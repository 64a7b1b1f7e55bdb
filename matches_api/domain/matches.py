"""Match records and store snapshots, plus their JSON (camelCase) shapes."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping

# attribute name -> wire name
WIRE_FIELDS = {
    "id": "id",
    "home_team": "homeTeam",
    "away_team": "awayTeam",
    "match_date": "matchDate",
    "home_goals": "homeGoals",
    "away_goals": "awayGoals",
    "yellow_cards": "yellowCards",
    "red_cards": "redCards",
    "extra_time": "extraTime",
}


@dataclass(frozen=True)
class Match:
    """One football match. Instances are immutable; the store swaps whole records."""

    id: int = 0
    home_team: str = ""
    away_team: str = ""
    match_date: str = ""
    home_goals: int = 0
    away_goals: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    extra_time: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {wire: getattr(self, attr) for attr, wire in WIRE_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Match":
        """
        Build a Match from its camelCase representation.

        Missing keys (and nulls) take their defaults. Raises ValueError/TypeError
        when a field has the wrong JSON type or the payload is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"match record must be an object, got {type(data).__name__}")
        return cls(
            id=_as_int(data.get("id", 0), "id"),
            home_team=_as_text(data.get("homeTeam"), "homeTeam"),
            away_team=_as_text(data.get("awayTeam"), "awayTeam"),
            match_date=_as_text(data.get("matchDate"), "matchDate"),
            home_goals=_as_counter(data.get("homeGoals", 0), "homeGoals"),
            away_goals=_as_counter(data.get("awayGoals", 0), "awayGoals"),
            yellow_cards=_as_counter(data.get("yellowCards", 0), "yellowCards"),
            red_cards=_as_counter(data.get("redCards", 0), "redCards"),
            extra_time=_as_flag(data.get("extraTime"), "extraTime"),
        )


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _as_text(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


def _as_flag(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def _as_counter(value: Any, name: str) -> int:
    number = _as_int(value, name)
    if number < 0:
        raise ValueError(f"{name} must not be negative, got {number}")
    return number


@dataclass(frozen=True)
class StoreSnapshot:
    """
    Full store state at one point in time: every record plus the next id.

    ``revision`` increases with each store mutation inside one process and only
    orders snapshot writes; it is not persisted.
    """

    matches: Mapping[int, Match] = field(default_factory=dict)
    next_id: int = 1
    revision: int = 0

    @classmethod
    def empty(cls) -> "StoreSnapshot":
        return cls()

    def to_document(self) -> Dict[str, Any]:
        return {
            "matches": {str(match_id): match.to_dict() for match_id, match in sorted(self.matches.items())},
            "nextID": self.next_id,
        }

    @classmethod
    def from_document(cls, document: Any) -> "StoreSnapshot":
        """
        Parse the persisted layout ``{"matches": {...}, "nextID": n}``.

        The next id is raised above the highest stored id when the document
        carries a smaller (or no) counter, so ids are never handed out twice.
        """
        if not isinstance(document, Mapping):
            raise ValueError("snapshot document must be a JSON object")
        raw_matches = document.get("matches") or {}
        if not isinstance(raw_matches, Mapping):
            raise ValueError("'matches' must be a JSON object")
        matches: Dict[int, Match] = {}
        for key, record in raw_matches.items():
            match_id = int(key)
            if match_id <= 0:
                raise ValueError(f"invalid match id {key!r}")
            matches[match_id] = replace(Match.from_dict(record), id=match_id)
        next_id = _as_int(document.get("nextID", 0), "nextID")
        floor = max(matches, default=0) + 1
        return cls(matches=matches, next_id=max(next_id, floor))
