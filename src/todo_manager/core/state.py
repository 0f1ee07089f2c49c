# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in handlers.
    settings: object

    # The one task list of this session (owned by the console loop).
    task_store: TaskRepo
