"""Background persistence of store snapshots and store bootstrap."""
from __future__ import annotations

import threading
import time
from typing import Optional, Protocol, Tuple

from matches_api.core.config import Settings
from matches_api.domain.matches import StoreSnapshot
from matches_api.repositories.json_storage import JsonMatchStorage
from matches_api.repositories.match_store import MatchStore


class SnapshotStorage(Protocol):
    def save(self, snapshot: StoreSnapshot) -> None: ...


class SnapshotWriter:
    """
    Single writer thread fed by a one-slot "latest pending snapshot" channel.

    ``submit`` never blocks on I/O: it replaces the pending snapshot when the
    new one has a higher revision. The thread writes one snapshot at a time,
    so writes never interleave on the file and always move forward in revision
    order. Failed writes are reported and dropped.
    """

    def __init__(self, storage: SnapshotStorage, *, name: str = "match-snapshot-writer") -> None:
        self._storage = storage
        self._cond = threading.Condition()
        self._pending: StoreSnapshot | None = None
        self._last_revision = -1
        self._writing = False
        self._closed = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    def start(self) -> "SnapshotWriter":
        self._thread.start()
        return self

    def submit(self, snapshot: StoreSnapshot) -> None:
        with self._cond:
            if self._closed:
                print(f"[snapshot] Writer closed; dropping revision {snapshot.revision}.")
                return
            newest = self._pending.revision if self._pending is not None else self._last_revision
            if snapshot.revision <= newest:
                return
            self._pending = snapshot
            self._cond.notify_all()

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until no snapshot is pending or being written. False on timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while self._pending is not None or self._writing:
                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    return False
                self._cond.wait(remaining)
            return True

    def close(self, timeout: float | None = 5.0) -> None:
        """Write whatever is still pending, then stop the thread."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()
        if self._thread.is_alive():
            self._thread.join(timeout)

    @property
    def last_revision(self) -> int:
        with self._cond:
            return self._last_revision

    def _run(self) -> None:
        while True:
            with self._cond:
                while self._pending is None and not self._closed:
                    self._cond.wait()
                if self._pending is None:
                    return
                snapshot = self._pending
                self._pending = None
                self._writing = True
            try:
                self._storage.save(snapshot)
            except Exception as exc:
                print(f"[snapshot] Failed to persist revision {snapshot.revision}: {exc}")
            finally:
                with self._cond:
                    self._writing = False
                    self._last_revision = max(self._last_revision, snapshot.revision)
                    self._cond.notify_all()


def open_match_store(settings: Settings) -> Tuple[MatchStore, Optional[SnapshotWriter]]:
    """
    Build the store for the running app.

    With persistence enabled the data file is loaded synchronously and a
    writer thread is started; the caller must ``close()`` it on shutdown.
    """
    if not settings.persistence_enabled:
        return MatchStore(), None
    storage = JsonMatchStorage(settings.data_file)
    snapshot = storage.load()
    writer = SnapshotWriter(storage).start()
    return MatchStore(snapshot, on_change=writer.submit), writer
