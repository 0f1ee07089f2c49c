# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console menu loop
in the main thread until the user picks Exit (or stdin ends).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    log_dir = settings.data_dir if settings.log_to_file else None
    log_file = setup_logging(log_dir=log_dir, console_level=settings.console_log_level)

    logger.info("Starting %s (log_file=%s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
