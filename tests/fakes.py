# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from tasklist.storage.kv_store import InMemoryKeyValueStore


class RecordingKeyValueStore(InMemoryKeyValueStore):
    """
    In-memory store that remembers every write.

    Lets tests assert "no-ops must not write" without touching SQLite.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, bytes]] = []

    def set(self, key: str, value: bytes) -> None:
        super().set(key, value)
        self.writes.append((key, value))


class FailingWriteKeyValueStore(InMemoryKeyValueStore):
    """Reads work, every write raises (full disk, locked db...)."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        super().__init__(initial)
        self.attempts = 0

    def set(self, key: str, value: bytes) -> None:
        self.attempts += 1
        raise OSError("disk full")


class FailingReadKeyValueStore(InMemoryKeyValueStore):
    def get(self, key: str) -> bytes | None:
        raise OSError("database is locked")


class FixedClock:
    """Deterministic clock: each call advances by one second."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 5, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(seconds=1)
        return current


class SequentialIds:
    def __init__(self, prefix: str = "task") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}-{self.n}"
