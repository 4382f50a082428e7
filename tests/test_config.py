# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.storage.kv_store import InMemoryKeyValueStore, SQLiteKeyValueStore

_VARS = (
    "TASKLIST_APP_NAME",
    "TASKLIST_LOG_LEVEL",
    "TASKLIST_LOG_TO_FILE",
    "TASKLIST_DATA_DIR",
    "TASKLIST_STORE_PATH",
    "TASKLIST_IN_MEMORY",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.in_memory is False
    assert s.data_dir == Path(".local/tasklist")
    assert s.store_path == Path(".local/tasklist") / "defaults.sqlite3"


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKLIST_APP_NAME", "groceries")
    clean_env.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKLIST_IN_MEMORY", "yes")
    clean_env.setenv("TASKLIST_LOG_TO_FILE", "off")

    s = Settings.from_env()
    assert s.app_name == "groceries"
    assert s.store_path == tmp_path / "defaults.sqlite3"
    assert s.in_memory is True
    assert s.log_to_file is False


def test_bootstrap_picks_backend(settings, tmp_path: Path) -> None:
    state = create_initial_state(settings=settings)
    assert isinstance(state.kv, SQLiteKeyValueStore)
    assert settings.store_path.exists()

    settings.in_memory = True
    settings.data_dir = tmp_path / "never-created"
    mem_state = create_initial_state(settings=settings)
    assert isinstance(mem_state.kv, InMemoryKeyValueStore)
    assert mem_state.task_store.snapshot() == ()
    assert not settings.data_dir.exists()
