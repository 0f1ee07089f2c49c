# src/todo_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the menu and console loop.

Handlers depend on these instead of concrete implementations,
so the console I/O and the task store can be swapped in tests.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

Prompt = Callable[[str], str]
# Blocking line reader (builtin `input` by default). Raises EOFError at end of input.

Emitter = Callable[[str], None]
# Line writer (builtin `print` by default).


class TaskRepo(Protocol):
    def add_task(self, text: str) -> None: ...
    def get_tasks(self) -> Sequence[str]: ...
    def delete_task(self, index: int) -> None: ...
    def count_tasks(self) -> int: ...
