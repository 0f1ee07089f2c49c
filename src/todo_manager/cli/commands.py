# src/todo_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import Emitter, Prompt
from ..core.state import AppState
from ..tasks.task_api import parse_number, parse_task_number, render_tasks

MenuHandler = Callable[[AppState, Prompt, Emitter], str]

MENU_TITLE = "To-Do List Manager"
CHOICE_PROMPT = "Enter your choice: "
TASK_PROMPT = "Enter task: "
DELETE_PROMPT = "Enter task number to delete: "

MSG_TASK_ADDED = "Task added!"
MSG_TASK_DELETED = "Task deleted!"
MSG_NO_TASKS = "No tasks available."
MSG_NO_TASKS_TO_DELETE = "No tasks to delete."
MSG_INVALID_TASK_NUMBER = "Invalid task number."
MSG_INVALID_CHOICE = "Invalid choice. Try again."
MSG_GOODBYE = "Goodbye!"

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MenuEntry:
    number: int
    label: str
    handler: MenuHandler
    exits: bool = False


class MenuRegistry:
    """Numbered menu registry used by the console loop (1. Add Task, ...)."""

    def __init__(self, title: str = MENU_TITLE) -> None:
        self.title = title
        self._entries: dict[int, MenuEntry] = {}

    def register(
        self,
        number: int,
        label: str,
        handler: MenuHandler,
        *,
        exits: bool = False,
    ) -> None:
        if number in self._entries:
            raise ValueError(f"menu number {number} is already registered")
        self._entries[number] = MenuEntry(number=number, label=label, handler=handler, exits=exits)

    def get(self, raw_choice: str | None) -> MenuEntry | None:
        """
        Look up the entry for a typed choice like "2".
        Returns None for unknown numbers and unparseable input.
        """
        number = parse_number(raw_choice)
        if number is None:
            return None
        return self._entries.get(number)

    def build_menu(self) -> str:
        lines = [self.title]
        for number in sorted(self._entries):
            lines.append(f"{number}. {self._entries[number].label}")
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_add(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    # Kept verbatim: empty and whitespace-only tasks are valid.
    text = prompt(TASK_PROMPT)
    state.task_store.add_task(text)
    logger.info("Task added (total=%s).", state.task_store.count_tasks())
    return MSG_TASK_ADDED


def cmd_view(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    tasks = state.task_store.get_tasks()
    if not tasks:
        return MSG_NO_TASKS
    return render_tasks(tasks)


def cmd_delete(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    """
    Show the numbered list, ask for a 1-based number, delete it.

    The bounds check happens here, so the store's own out-of-range
    no-op is never reached from the menu.
    """
    tasks = state.task_store.get_tasks()
    if not tasks:
        return MSG_NO_TASKS_TO_DELETE

    emit(render_tasks(tasks))
    raw = prompt(DELETE_PROMPT)
    number = parse_task_number(raw, len(tasks))
    if number is None:
        logger.debug("Rejected task number %r (total=%s).", raw, len(tasks))
        return MSG_INVALID_TASK_NUMBER

    state.task_store.delete_task(number - 1)
    logger.info("Task %s deleted (total=%s).", number, state.task_store.count_tasks())
    return MSG_TASK_DELETED


def cmd_exit(state: AppState, prompt: Prompt, emit: Emitter) -> str:
    return MSG_GOODBYE


registry.register(1, "Add Task", cmd_add)
registry.register(2, "View Tasks", cmd_view)
registry.register(3, "Delete Task", cmd_delete)
registry.register(4, "Exit", cmd_exit, exits=True)
