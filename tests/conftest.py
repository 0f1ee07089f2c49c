# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_manager.core.state import AppState
from todo_manager.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        console_log_level=logging.WARNING,
        log_to_file=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore())


@pytest.fixture()
def seeded_state(state: AppState) -> AppState:
    for text in ("A", "B", "C"):
        state.task_store.add_task(text)
    return state


@pytest.fixture()
def restore_root_logging():
    """Undo setup_logging(): drop the handlers it installed and restore the root level."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    logging.captureWarnings(False)
