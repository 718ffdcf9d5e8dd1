"""
Task identifiers (ULIDs).
"""

from __future__ import annotations

from ulid import ULID

# Crockford base32, 26 chars. Case-insensitive on input.
TASK_ID_PATTERN = r"^[0-9A-HJKMNP-TV-Za-hjkmnp-tv-z]{26}$"


def new_task_id() -> str:
    return str(ULID())
