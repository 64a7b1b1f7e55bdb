"""
JSON file adapter for store snapshots.

Layout: ``{"matches": {"<id>": {...record...}}, "nextID": <n>}``, rewritten
wholesale on every save.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
import tempfile

from matches_api.domain.matches import StoreSnapshot


class JsonMatchStorage:
    """Reads and writes the whole store as a single JSON document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> StoreSnapshot:
        """
        Return the persisted snapshot.

        A missing file is a fresh start. An unreadable or malformed file is
        reported and also yields an empty store instead of aborting startup.
        """
        if not self.path.exists():
            return StoreSnapshot.empty()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
            return StoreSnapshot.from_document(document)
        except OSError as exc:
            print(f"[storage] Could not read {self.path}: {exc}; starting empty.")
        except (ValueError, TypeError) as exc:
            print(f"[storage] Malformed data file {self.path}: {exc}; starting empty.")
        return StoreSnapshot.empty()

    def save(self, snapshot: StoreSnapshot) -> None:
        """Write the snapshot to a temp file next to the target and swap it in."""
        payload = json.dumps(snapshot.to_document(), ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise
