"""Append-only activity log, newest entry first."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from voucher_ledger.core.entities.activity import ActivityKind, ActivityLogEntry


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ActivityLog:
    """Audit trail of ledger mutations."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock
        self._entries: list[ActivityLogEntry] = []

    @property
    def entries(self) -> tuple[ActivityLogEntry, ...]:
        """All entries, most recent first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def latest(self) -> ActivityLogEntry | None:
        return self._entries[0] if self._entries else None

    def append(self, kind: ActivityKind, message: str) -> ActivityLogEntry:
        """Create an entry with a fresh id and timestamp and put it at the head."""
        timestamp = self._clock()
        entry_id = int(timestamp.timestamp() * 1000)
        if self._entries and entry_id <= self._entries[0].id:
            entry_id = self._entries[0].id + 1

        entry = ActivityLogEntry(
            id=entry_id,
            timestamp=timestamp,
            kind=kind,
            message=message,
        )
        self._entries.insert(0, entry)
        return entry

    def restore(self, entries: Iterable[ActivityLogEntry]) -> None:
        """Replace the history with persisted entries (any order)."""
        self._entries = sorted(entries, key=lambda e: e.id, reverse=True)
