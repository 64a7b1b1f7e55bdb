"""In-memory match registry guarded by a reader/writer lock."""
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, List, Optional

from matches_api.core.rwlock import ReadWriteLock
from matches_api.domain.matches import Match, StoreSnapshot

SnapshotListener = Callable[[StoreSnapshot], None]


class MatchStore:
    """
    Sole owner of match state.

    Reads take the shared side of the lock, mutations the exclusive side.
    When ``on_change`` is given, every successful mutation captures a snapshot
    under the lock and hands it to the listener after the lock is released.
    """

    def __init__(self, snapshot: StoreSnapshot | None = None, on_change: SnapshotListener | None = None) -> None:
        initial = snapshot or StoreSnapshot.empty()
        self._matches: Dict[int, Match] = dict(initial.matches)
        self._next_id = initial.next_id
        self._revision = 0
        self._lock = ReadWriteLock()
        self._on_change = on_change

    # -------------------------- reads --------------------------
    def get_all(self) -> List[Match]:
        with self._lock.read_locked():
            return [self._matches[match_id] for match_id in sorted(self._matches)]

    def get(self, match_id: int) -> Optional[Match]:
        with self._lock.read_locked():
            return self._matches.get(match_id)

    def snapshot(self) -> StoreSnapshot:
        with self._lock.read_locked():
            return StoreSnapshot(matches=dict(self._matches), next_id=self._next_id, revision=self._revision)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._matches)

    # -------------------------- writes --------------------------
    def create(self, match: Match) -> Match:
        with self._lock.write_locked():
            created = replace(match, id=self._next_id)
            self._matches[created.id] = created
            self._next_id += 1
            snapshot = self._capture()
        self._publish(snapshot)
        return created

    def update(self, match_id: int, match: Match) -> Optional[Match]:
        with self._lock.write_locked():
            if match_id not in self._matches:
                return None
            updated = replace(match, id=match_id)
            self._matches[match_id] = updated
            snapshot = self._capture()
        self._publish(snapshot)
        return updated

    def delete(self, match_id: int) -> bool:
        with self._lock.write_locked():
            if self._matches.pop(match_id, None) is None:
                return False
            snapshot = self._capture()
        self._publish(snapshot)
        return True

    def register_goal(self, match_id: int) -> Optional[Match]:
        return self._modify(match_id, lambda m: replace(m, home_goals=m.home_goals + 1))

    def register_yellow_card(self, match_id: int) -> Optional[Match]:
        return self._modify(match_id, lambda m: replace(m, yellow_cards=m.yellow_cards + 1))

    def register_red_card(self, match_id: int) -> Optional[Match]:
        return self._modify(match_id, lambda m: replace(m, red_cards=m.red_cards + 1))

    def set_extra_time(self, match_id: int) -> Optional[Match]:
        return self._modify(match_id, lambda m: replace(m, extra_time=True))

    # -------------------------- helpers --------------------------
    def _modify(self, match_id: int, change: Callable[[Match], Match]) -> Optional[Match]:
        with self._lock.write_locked():
            current = self._matches.get(match_id)
            if current is None:
                return None
            updated = change(current)
            self._matches[match_id] = updated
            snapshot = self._capture()
        self._publish(snapshot)
        return updated

    def _capture(self) -> StoreSnapshot | None:
        # caller holds the write lock
        self._revision += 1
        if self._on_change is None:
            return None
        return StoreSnapshot(matches=dict(self._matches), next_id=self._next_id, revision=self._revision)

    def _publish(self, snapshot: StoreSnapshot | None) -> None:
        if snapshot is not None and self._on_change is not None:
            self._on_change(snapshot)
