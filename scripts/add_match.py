#!/usr/bin/env python3
"""
Register a match directly in the JSON data file (server stopped).

Usage:
  python scripts/add_match.py --home "River" --away "Boca" [--date 2024-05-12] [--data-file matches.json]
"""
from __future__ import annotations

import argparse
import sys

from matches_api.core.config import get_settings
from matches_api.domain.matches import Match
from matches_api.repositories.json_storage import JsonMatchStorage
from matches_api.repositories.match_store import MatchStore


def main(argv: list[str] | None = None) -> Match:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Register a match in the data file")
    ap.add_argument("--home", required=True, help="Home team")
    ap.add_argument("--away", required=True, help="Away team")
    ap.add_argument("--date", default="", help="Match date (free text, e.g. 2024-05-12)")
    ap.add_argument("--data-file", default=str(settings.data_file), help="JSON data file")
    args = ap.parse_args(argv)

    home = (args.home or "").strip()
    away = (args.away or "").strip()
    if not home or not away:
        raise SystemExit("Both teams are required")

    storage = JsonMatchStorage(args.data_file)
    store = MatchStore(storage.load())
    match = store.create(Match(home_team=home, away_team=away, match_date=(args.date or "").strip()))
    storage.save(store.snapshot())
    print("OK: match registered")
    print(f"  ID: {match.id}")
    print(f"  {match.home_team} vs {match.away_team}")
    if match.match_date:
        print(f"  Date: {match.match_date}")
    return match


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
