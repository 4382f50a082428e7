# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Any, Protocol

TaskListener = Callable[[tuple[Any, ...]], None]
# Receives the new snapshot after every effective mutation.


class KeyValueStore(Protocol):
    """Process-wide key/value storage holding opaque blobs."""

    def get(self, key: str) -> bytes | None: ...
    def set(self, key: str, value: bytes) -> None: ...
