# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key/value backend, persistence and TaskStore into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore, SQLiteKeyValueStore
from ..tasks.task_persistence import TaskPersistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    if getattr(settings, "in_memory", False):
        logger.info("Using in-memory storage; tasks will not survive a restart.")
        return InMemoryKeyValueStore()
    return SQLiteKeyValueStore(settings.store_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if not getattr(settings, "in_memory", False):
        _ensure_local_dirs(settings)

    kv = create_kv_store(settings)
    task_store = TaskStore(TaskPersistence(kv))

    return AppState(settings=settings, kv=kv, task_store=task_store)
