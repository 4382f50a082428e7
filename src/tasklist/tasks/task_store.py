# tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime

from ..core.ports import TaskListener
from .task_models import Task, new_task_id, normalize_title, utc_now
from .task_persistence import TaskPersistence

logger = logging.getLogger(__name__)


def _valid_positions(positions: Iterable[int], size: int) -> set[int] | None:
    """Return the positions as a set, or None if empty or any is out of range."""
    out: set[int] = set()
    for p in positions:
        if isinstance(p, bool) or not isinstance(p, int) or not 0 <= p < size:
            return None
        out.add(p)
    return out or None


class TaskStore:
    """
    Owner of the ordered task list.

    Every mutating method is total: bad input (blank title, unknown id,
    out-of-range position) is a silent no-op. An effective mutation builds
    the new list first, swaps it in, writes it through TaskPersistence and
    then notifies subscribers. No-ops neither write nor notify.

    Thread-safety:
    - all operations (snapshot included) are serialized by one RLock
    - listeners run outside the lock, so with concurrent mutators two
      notifications may arrive out of order; a listener that needs the
      latest state should call snapshot() instead of trusting its argument.
      The console runs everything on one thread, where order is exact.
    """

    def __init__(
        self,
        persistence: TaskPersistence,
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._persistence = persistence
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()
        self._listeners: list[TaskListener] = []
        self._tasks: list[Task] = persistence.load()
        logger.info("TaskStore ready key=%s total=%d", persistence.key, len(self._tasks))

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _commit(self, tasks: list[Task]) -> tuple[Task, ...]:
        # caller holds the lock
        self._tasks = tasks
        snap = tuple(tasks)
        self._persistence.save(snap)
        return snap

    def _notify(self, snap: tuple[Task, ...]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(snap)
            except Exception:
                logger.exception("Task listener %r failed.", listener)

    # ---- reads ----

    def snapshot(self) -> tuple[Task, ...]:
        with self._lock:
            return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return None if idx is None else self._tasks[idx]

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    # ---- mutations ----

    def add(self, raw_title: str) -> Task | None:
        title = normalize_title(raw_title)
        if not title:
            logger.debug("add ignored: blank title")
            return None

        with self._lock:
            task_id = self._id_factory()
            while self._index_of(task_id) is not None:
                task_id = self._id_factory()
            task = Task(id=task_id, title=title, is_done=False, created_at=self._clock())
            snap = self._commit([task, *self._tasks])

        logger.debug("Task added id=%s", task.id)
        self._notify(snap)
        return task

    def toggle(self, task_id: str) -> None:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                logger.debug("toggle ignored: unknown id=%s", task_id)
                return
            tasks = list(self._tasks)
            tasks[idx] = replace(tasks[idx], is_done=not tasks[idx].is_done)
            snap = self._commit(tasks)
        self._notify(snap)

    def rename(self, task_id: str, raw_title: str) -> bool:
        """Set a new title. Returns False when the call was ignored."""
        title = normalize_title(raw_title)
        if not title:
            logger.debug("rename ignored: blank title for id=%s", task_id)
            return False

        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                logger.debug("rename ignored: unknown id=%s", task_id)
                return False
            if self._tasks[idx].title == title:
                return True
            tasks = list(self._tasks)
            tasks[idx] = replace(tasks[idx], title=title)
            snap = self._commit(tasks)
        self._notify(snap)
        return True

    def delete(self, task_id: str) -> None:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                logger.debug("delete ignored: unknown id=%s", task_id)
                return
            snap = self._commit(self._tasks[:idx] + self._tasks[idx + 1 :])
        self._notify(snap)

    def delete_at(self, positions: Iterable[int]) -> None:
        """Remove the tasks at the given positions (as they are before the call)."""
        with self._lock:
            doomed = _valid_positions(positions, len(self._tasks))
            if doomed is None:
                logger.debug("delete_at ignored: empty or out-of-range positions")
                return
            snap = self._commit([t for i, t in enumerate(self._tasks) if i not in doomed])
        self._notify(snap)

    def move(self, positions: Iterable[int], to: int) -> None:
        """
        Move the tasks at `positions` to just before position `to`.

        `to` refers to the list as it is before the move (0..len). The moved
        tasks keep their relative order.
        """
        with self._lock:
            size = len(self._tasks)
            moving = _valid_positions(positions, size)
            bad_to = isinstance(to, bool) or not isinstance(to, int) or not 0 <= to <= size
            if moving is None or bad_to:
                logger.debug("move ignored: positions/to out of range (to=%s)", to)
                return

            picked = [self._tasks[i] for i in sorted(moving)]
            rest = [t for i, t in enumerate(self._tasks) if i not in moving]
            dest = to - sum(1 for i in moving if i < to)
            tasks = rest[:dest] + picked + rest[dest:]

            if [t.id for t in tasks] == [t.id for t in self._tasks]:
                return
            snap = self._commit(tasks)
        self._notify(snap)
