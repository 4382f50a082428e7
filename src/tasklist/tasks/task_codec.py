# tasks/task_codec.py

"""
JSON codec for the persisted task list.

Blob layout (UTF-8 JSON), order is display order:

    [{"id": "...", "title": "...", "isDone": false,
      "createdAt": "2024-05-01T09:30:00.123456+00:00"}, ...]
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .task_models import Task, normalize_title

_FIELDS = ("id", "title", "isDone", "createdAt")


class TaskCodecError(ValueError):
    """Blob is not valid JSON or does not match the task list schema."""


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "isDone": task.is_done,
        "createdAt": task.created_at.isoformat(),
    }


def _dict_to_task(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise TaskCodecError(f"item {index}: expected object, got {type(raw).__name__}")

    missing = [k for k in _FIELDS if k not in raw]
    if missing:
        raise TaskCodecError(f"item {index}: missing fields {missing}")

    task_id = raw["id"]
    title = raw["title"]
    is_done = raw["isDone"]
    created_raw = raw["createdAt"]

    if not isinstance(task_id, str) or not task_id:
        raise TaskCodecError(f"item {index}: id must be a non-empty string")
    if not isinstance(title, str) or not normalize_title(title):
        raise TaskCodecError(f"item {index}: title must be a non-blank string")
    if not isinstance(is_done, bool):
        raise TaskCodecError(f"item {index}: isDone must be a boolean")
    if not isinstance(created_raw, str):
        raise TaskCodecError(f"item {index}: createdAt must be an ISO-8601 string")

    try:
        created_at = datetime.fromisoformat(created_raw)
    except ValueError as e:
        raise TaskCodecError(f"item {index}: bad createdAt {created_raw!r}") from e
    if created_at.tzinfo is None:
        raise TaskCodecError(f"item {index}: createdAt has no UTC offset")

    return Task(id=task_id, title=title, is_done=is_done, created_at=created_at)


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    payload = [_task_to_dict(t) for t in tasks]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def decode_tasks(blob: bytes | str) -> list[Task]:
    """Decode the whole list or raise TaskCodecError. No partial recovery."""
    try:
        data = json.loads(blob)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TaskCodecError(f"not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskCodecError(f"expected a JSON array, got {type(data).__name__}")

    tasks = [_dict_to_task(raw, i) for i, raw in enumerate(data)]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise TaskCodecError(f"duplicate task id {t.id}")
        seen.add(t.id)

    return tasks
