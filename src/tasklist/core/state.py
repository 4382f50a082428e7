# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .ports import KeyValueStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: Any

    kv: KeyValueStore
    task_store: TaskStore
