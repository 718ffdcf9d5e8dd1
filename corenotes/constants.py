"""
Fixed values shared by the schemas, the store and the routes.
"""

from __future__ import annotations

import random
from typing import Literal, get_args

TaskColor = Literal[
    "yellow", "orange", "red", "pink", "purple", "blue", "green", "gray"
]

TASK_AVAILABLE_COLORS: tuple[str, ...] = get_args(TaskColor)


def pick_task_color(rng: random.Random) -> str:
    """Return a palette color chosen uniformly with the given source."""
    return TASK_AVAILABLE_COLORS[rng.randrange(len(TASK_AVAILABLE_COLORS))]
