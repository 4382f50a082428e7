"""
tasklist: a single-screen to-do list.

Packages:
- tasks/: Task model, JSON codec, persistence and the TaskStore
- storage/: key/value backends (SQLite, in-memory)
- cli/ + connectors/: composition root and the console front end
"""

__version__ = "0.1.0"
