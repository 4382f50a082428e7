# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState
from tasklist.tasks.task_persistence import TaskPersistence
from tasklist.tasks.task_store import TaskStore

from .fakes import FixedClock, RecordingKeyValueStore, SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path / "data",
        store_path=tmp_path / "data" / "defaults.sqlite3",
        in_memory=False,
    )


@pytest.fixture()
def kv() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture()
def store(kv: RecordingKeyValueStore) -> TaskStore:
    """TaskStore over an in-memory backend with deterministic ids and clock."""
    return TaskStore(TaskPersistence(kv), clock=FixedClock(), id_factory=SequentialIds())


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired through the real composition root.

    NOTE: The SQLite key/value store is kept real here because the
    save-on-mutation / load-on-start cycle is part of what we want to test.
    """
    return create_initial_state(settings=settings)
