from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for extra in (ROOT, ROOT / "scripts"):
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

import add_match  # noqa: E402


def test_add_match_appends_to_data_file(tmp_path, capsys):
    data_file = tmp_path / "matches.json"
    data_file.write_text(
        json.dumps({"matches": {"1": {"id": 1, "homeTeam": "A", "awayTeam": "B"}}, "nextID": 3}),
        encoding="utf-8",
    )

    match = add_match.main(["--home", "River", "--away", "Boca", "--date", "2024-05-12", "--data-file", str(data_file)])

    assert match.id == 3
    document = json.loads(data_file.read_text(encoding="utf-8"))
    assert document["nextID"] == 4
    assert document["matches"]["3"]["homeTeam"] == "River"
    assert "ID: 3" in capsys.readouterr().out
