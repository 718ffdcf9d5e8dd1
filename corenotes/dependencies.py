"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import random

from corenotes.config import get_settings
from corenotes.db import InMemoryTaskStore, SqlTaskStore, TaskStore

_task_store: TaskStore | None = None
_rng: random.Random | None = None


def get_task_store() -> TaskStore:
    """
    Return a singleton task store so data persists across requests.
    """
    global _task_store
    if _task_store:
        return _task_store

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        _task_store = InMemoryTaskStore()
    else:
        _task_store = SqlTaskStore(settings.database_url)
    return _task_store


def get_rng() -> random.Random:
    """Randomness source for color assignment; override in tests."""
    global _rng
    if _rng is None:
        _rng = random.SystemRandom()
    return _rng
