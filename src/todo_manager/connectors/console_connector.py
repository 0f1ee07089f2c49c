# src/todo_manager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CHOICE_PROMPT, MSG_INVALID_CHOICE
from ..cli.commands import registry as menu_registry
from ..core.ports import Emitter, Prompt
from ..core.state import AppState

logger = logging.getLogger(__name__)

MSG_INTERNAL_ERROR = "Internal error while handling a menu choice."


def run_console_loop(
    state: AppState,
    *,
    prompt: Prompt | None = None,
    emit: Emitter | None = None,
) -> None:
    """
    Menu -> read choice -> dispatch -> print reply, until Exit or end of input.
    Read failures (OSError, ValueError from the prompt) count as end of input;
    only exceptions from handler logic get the internal-error reply.

    A blank line is printed after every reply except the Exit one.
    """
    read_line = input if prompt is None else prompt
    if emit is None:
        emit = print

    def read(text: str) -> str:
        # A broken stdin (closed, EIO after hangup) ends the session like EOF.
        try:
            return read_line(text)
        except (OSError, ValueError) as e:
            logger.info("Console input failed (%s), treating as end of input.", e)
            raise EOFError from e

    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())

    while True:
        emit(menu_registry.build_menu())

        try:
            raw_choice = read(CHOICE_PROMPT)
            entry = menu_registry.get(raw_choice)
            if entry is None:
                logger.debug("Invalid menu choice %r.", raw_choice)
                reply = MSG_INVALID_CHOICE
            else:
                reply = entry.handler(state, read, emit)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            entry = None
            reply = MSG_INTERNAL_ERROR

        emit(reply)

        if entry is not None and entry.exits:
            logger.info("Console exit choice received.")
            break

        emit("")

    logger.info("Console connector finished (tasks=%s).", state.task_store.count_tasks())
