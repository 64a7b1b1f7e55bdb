"""
Loading and saving store snapshots through the JSON data file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from matches_api.domain.matches import Match, StoreSnapshot  # noqa: E402
from matches_api.repositories.json_storage import JsonMatchStorage  # noqa: E402
from matches_api.repositories.match_store import MatchStore  # noqa: E402


def _record(match_id: int, home: str, away: str, **extra) -> dict:
    data = {"id": match_id, "homeTeam": home, "awayTeam": away, "matchDate": "2024-05-12"}
    data.update(extra)
    return data


def test_missing_file_starts_empty(tmp_path):
    snapshot = JsonMatchStorage(tmp_path / "matches.json").load()
    assert snapshot.matches == {}
    assert snapshot.next_id == 1


def test_malformed_file_logs_and_starts_empty(tmp_path, capsys):
    path = tmp_path / "matches.json"
    path.write_text("{not json", encoding="utf-8")

    snapshot = JsonMatchStorage(path).load()

    assert snapshot == StoreSnapshot.empty()
    assert "[storage]" in capsys.readouterr().out


def test_wrong_shape_is_treated_as_malformed(tmp_path, capsys):
    path = tmp_path / "matches.json"
    path.write_text(json.dumps({"matches": {"abc": {}}, "nextID": 2}), encoding="utf-8")

    assert JsonMatchStorage(path).load().matches == {}
    assert "Malformed" in capsys.readouterr().out


@pytest.mark.parametrize(
    "record",
    [
        {"extraTime": "false"},
        {"homeTeam": 7},
        {"matchDate": ["2024"]},
        {"awayGoals": 1.5},
    ],
)
def test_wrong_field_types_are_malformed(tmp_path, capsys, record):
    path = tmp_path / "matches.json"
    path.write_text(json.dumps({"matches": {"1": record}, "nextID": 2}), encoding="utf-8")

    assert JsonMatchStorage(path).load() == StoreSnapshot.empty()
    assert "Malformed" in capsys.readouterr().out


def test_null_fields_load_as_defaults(tmp_path):
    path = tmp_path / "matches.json"
    record = {"homeTeam": None, "awayTeam": "B", "extraTime": None, "redCards": None}
    path.write_text(json.dumps({"matches": {"1": record}, "nextID": 2}), encoding="utf-8")

    match = JsonMatchStorage(path).load().matches[1]

    assert match == Match(id=1, away_team="B")


def test_restart_with_three_records_continues_at_next_id(tmp_path):
    path = tmp_path / "matches.json"
    document = {
        "matches": {
            "1": _record(1, "River", "Boca", homeGoals=2),
            "2": _record(2, "Racing", "Independiente"),
            "3": _record(3, "Lanus", "Banfield", extraTime=True),
        },
        "nextID": 4,
    }
    path.write_text(json.dumps(document), encoding="utf-8")

    store = MatchStore(JsonMatchStorage(path).load())

    matches = store.get_all()
    assert [m.id for m in matches] == [1, 2, 3]
    assert matches[0].home_goals == 2
    assert matches[1].yellow_cards == 0
    assert matches[2].extra_time is True
    assert store.create(Match(home_team="Velez", away_team="Huracan")).id == 4


def test_next_id_never_below_stored_ids(tmp_path):
    path = tmp_path / "matches.json"
    document = {"matches": {"5": _record(5, "A", "B"), "2": _record(2, "C", "D")}, "nextID": 3}
    path.write_text(json.dumps(document), encoding="utf-8")

    snapshot = JsonMatchStorage(path).load()

    assert snapshot.next_id == 6


def test_save_writes_layout_and_replaces_previous_file(tmp_path):
    path = tmp_path / "data" / "matches.json"
    storage = JsonMatchStorage(path)
    storage.save(StoreSnapshot(matches={1: Match(id=1, home_team="A", away_team="B")}, next_id=2))
    storage.save(
        StoreSnapshot(
            matches={1: Match(id=1, home_team="A", away_team="B", red_cards=1), 3: Match(id=3)},
            next_id=4,
        )
    )

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["nextID"] == 4
    assert set(document["matches"]) == {"1", "3"}
    assert document["matches"]["1"]["redCards"] == 1
    assert document["matches"]["1"]["homeTeam"] == "A"
    assert [p.name for p in path.parent.iterdir()] == ["matches.json"]

    reloaded = storage.load()
    assert reloaded.next_id == 4
    assert reloaded.matches[1].red_cards == 1
