# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task store.

    Tasks are plain strings kept in insertion order; that order is also
    the display/addressing order (position n shown to the user == index n-1).

    Out-of-range deletes are a silent no-op, not an error.
    """

    def __init__(self) -> None:
        self._tasks: list[str] = []
        logger.debug("TaskStore ready total=%s", self.count_tasks())

    def __len__(self) -> int:
        return len(self._tasks)

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, text: str) -> None:
        self._tasks.append(text)
        logger.debug("Task added index=%s total=%s", len(self._tasks) - 1, len(self._tasks))

    def get_tasks(self) -> tuple[str, ...]:
        """Read-only snapshot of the tasks, in order."""
        return tuple(self._tasks)

    def delete_task(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            logger.debug("delete_task ignored: index=%s out of range total=%s", index, len(self._tasks))
            return
        del self._tasks[index]
        logger.debug("Task deleted index=%s total=%s", index, len(self._tasks))
