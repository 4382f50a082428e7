# tests/test_task_codec.py

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from tasklist.tasks.task_codec import TaskCodecError, decode_tasks, encode_tasks
from tasklist.tasks.task_models import Task


def _item(**overrides) -> dict:
    item = {
        "id": "6f1c0f0e-8f59-4a59-9d43-5f3f9c1f6d11",
        "title": "Buy milk",
        "isDone": False,
        "createdAt": "2024-05-01T09:30:00.123456+00:00",
    }
    item.update(overrides)
    return item


def test_round_trip_preserves_everything() -> None:
    tasks = [
        Task(
            id="b",
            title="Walk dog",
            is_done=True,
            created_at=datetime(2024, 5, 1, 9, 31, 7, 654321, tzinfo=timezone.utc),
        ),
        Task(
            id="a",
            title="Купить молоко",
            is_done=False,
            created_at=datetime(2023, 12, 31, 23, 59, 59, 1, tzinfo=timezone(timedelta(hours=9))),
        ),
        Task(title="fresh"),
    ]

    decoded = decode_tasks(encode_tasks(tasks))

    assert decoded == tasks
    assert [t.created_at.utcoffset() for t in decoded] == [t.created_at.utcoffset() for t in tasks]


def test_encode_uses_camel_case_fields_in_order() -> None:
    task = Task(
        id="x",
        title="T",
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )
    data = json.loads(encode_tasks([task]))
    assert data == [
        {"id": "x", "title": "T", "isDone": False, "createdAt": "2024-01-02T03:04:05+00:00"}
    ]


def test_empty_list_round_trips() -> None:
    assert encode_tasks([]) == b"[]"
    assert decode_tasks(b"[]") == []


def test_decode_accepts_str() -> None:
    tasks = decode_tasks(json.dumps([_item()]))
    assert tasks[0].title == "Buy milk"


@pytest.mark.parametrize(
    "blob",
    [
        b"",
        b"not json",
        b"\xff\xfe\x00",
        b'{"id": "x"}',
        b"null",
        json.dumps([1]).encode(),
        json.dumps([{"id": "x", "title": "T", "isDone": False}]).encode(),
        json.dumps([_item(id="")]).encode(),
        json.dumps([_item(id=5)]).encode(),
        json.dumps([_item(title="   ")]).encode(),
        json.dumps([_item(title=None)]).encode(),
        json.dumps([_item(isDone="yes")]).encode(),
        json.dumps([_item(isDone=0)]).encode(),
        json.dumps([_item(createdAt=736_000_000.0)]).encode(),
        json.dumps([_item(createdAt="yesterday")]).encode(),
        json.dumps([_item(createdAt="2024-05-01T09:30:00")]).encode(),
        json.dumps([_item(), _item(title="dup")]).encode(),
    ],
)
def test_decode_rejects_bad_blobs(blob: bytes) -> None:
    with pytest.raises(TaskCodecError):
        decode_tasks(blob)


def test_one_bad_item_rejects_whole_blob() -> None:
    blob = json.dumps([_item(id="ok"), _item(id="bad", isDone=None)]).encode()
    with pytest.raises(TaskCodecError, match="item 1"):
        decode_tasks(blob)
