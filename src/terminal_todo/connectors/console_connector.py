# src/terminal_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import ModuleType

from ..cli.commands import CommandRegistry, render_task_list
from ..cli.commands import registry as command_registry
from ..core.ports import Message, MessageCategory
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "todo> "
EXIT_WORDS = ("exit", "quit")
LABEL_WIDTH = 8

RESET = "\033[0m"
DIM = "\033[2m"
CATEGORY_COLOR: dict[MessageCategory, str] = {
    MessageCategory.INFO: "\033[90m",
    MessageCategory.SUCCESS: "\033[32m",
    MessageCategory.WARNING: "\033[33m",
    MessageCategory.ERROR: "\033[31m",
}


def render_message(msg: Message, *, color: bool = False) -> str:
    """
    Render one message as `<label> <text>`.

    Done task lines get a check mark; colors only when `color` is set.
    """
    label = msg.label.ljust(LABEL_WIDTH)
    text = f"{msg.text} ✓" if msg.done else msg.text
    if not color:
        return f"{label} {text}"
    label = f"{CATEGORY_COLOR[msg.category]}{label}{RESET}"
    if msg.done:
        text = f"{DIM}{text}{RESET}"
    return f"{label} {text}"


def _init_line_editing(history_size: int) -> ModuleType | None:
    """Up/down history through GNU readline when the platform has it."""
    try:
        import readline
    except ImportError:
        logger.debug("readline not available; arrow-key history disabled.")
        return None
    readline.set_auto_history(False)
    readline.set_history_length(history_size if history_size > 0 else -1)
    return readline


def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry = command_registry,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    settings = state.settings
    color = bool(getattr(settings, "color", False))
    app_name = str(getattr(settings, "app_name", "Terminal TODO"))

    rl = _init_line_editing(int(getattr(settings, "history_size", 0) or 0)) if read_line is input else None

    def emit(messages: Iterable[Message]) -> None:
        for msg in messages:
            write(render_message(msg, color=color))

    logger.info("Console connector started (color=%s).", color)
    emit([Message(MessageCategory.INFO, "info", f"Welcome to {app_name}. Type ‘help’.")])
    if state.task_store.count_tasks():
        emit(render_task_list(state.task_store))

    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if state.remember(line) and rl is not None:
            rl.add_history(line.strip())

        if line.strip().lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            break

        try:
            messages = registry.handle(state.task_store, line)
        except Exception:
            logger.exception("Command handler crashed.")
            messages = [Message(MessageCategory.ERROR, "error", "Internal error while handling a command.")]

        emit(messages)

    logger.info("Console connector finished.")
