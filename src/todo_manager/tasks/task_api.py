# src/todo_manager/tasks/task_api.py

from __future__ import annotations

import re
from collections.abc import Sequence

TASKS_HEADER = "Your Tasks:"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def render_tasks(tasks: Sequence[str]) -> str:
    """
    Render tasks as a numbered list:

        Your Tasks:
        1. first
        2. second

    Numbers are 1-based positions at the moment of rendering.
    """
    lines = [TASKS_HEADER]
    for i, text in enumerate(tasks, start=1):
        lines.append(f"{i}. {text}")
    return "\n".join(lines)


def parse_number(raw: str | None) -> int | None:
    """
    Parse a user-typed integer: optional sign, ASCII digits only.
    Returns None for anything else ("1_0", "2 foo", non-ASCII digits).
    """
    if raw is None:
        return None
    s = raw.strip()
    if not _INT_RE.fullmatch(s):
        return None
    return int(s)


def parse_task_number(raw: str | None, count: int) -> int | None:
    """
    Parse a 1-based task number and check it against the current list size.
    Returns the number if it is within [1, count], else None.
    """
    n = parse_number(raw)
    if n is None or not 1 <= n <= count:
        return None
    return n
