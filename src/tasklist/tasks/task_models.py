# tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def normalize_title(raw: str | None) -> str:
    """Strip surrounding whitespace (newlines included). Empty result means 'blank'."""
    if not raw:
        return ""
    return raw.strip()


def new_task_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do record.

    Frozen: the store replaces items instead of mutating them, so a
    snapshot handed to the UI never changes underneath it.
    """

    title: str
    id: str = field(default_factory=new_task_id)
    is_done: bool = False
    created_at: datetime = field(default_factory=utc_now)
