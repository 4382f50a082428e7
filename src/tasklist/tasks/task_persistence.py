# tasks/task_persistence.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.ports import KeyValueStore
from .task_codec import decode_tasks, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "TASKS_V1"


class TaskPersistence:
    """
    Save/load the whole task list as one blob under STORAGE_KEY.

    Both directions are best-effort: failures are logged and never raised,
    the in-memory list stays authoritative.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def save(self, tasks: Sequence[Task]) -> bool:
        try:
            blob = encode_tasks(tasks)
            self._kv.set(self._key, blob)
        except Exception:
            logger.exception("Failed to save %d tasks under key=%s", len(tasks), self._key)
            return False
        logger.debug("Saved %d tasks under key=%s", len(tasks), self._key)
        return True

    def load(self) -> list[Task]:
        try:
            blob = self._kv.get(self._key)
        except Exception:
            logger.exception("Failed to read key=%s; starting empty.", self._key)
            return []

        if blob is None:
            logger.info("No saved tasks under key=%s (first run).", self._key)
            return []

        try:
            tasks = decode_tasks(blob)
        except Exception:
            logger.exception("Saved tasks under key=%s are unreadable; starting empty.", self._key)
            return []

        logger.info("Loaded %d tasks from key=%s", len(tasks), self._key)
        return tasks
