# src/terminal_todo/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.errors import TodoError, UnknownCommandError, ValidationError
from ..core.ports import Message, MessageCategory
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """
    A raw line split into the command token and its tail.

    `name` is lower-cased; `token` keeps the original spelling for error echoes.
    `tail` keeps internal whitespace (multi-word titles); `args` is tail.split().
    """

    name: str
    token: str
    tail: str
    args: list[str] = field(default_factory=list)


CommandHandler = Callable[[TaskStore, ParsedCommand], list[Message]]


def parse_command(line: str) -> ParsedCommand | None:
    """Returns None for empty / whitespace-only input."""
    parts = (line or "").strip().split(None, 1)
    if not parts:
        return None
    token = parts[0]
    tail = parts[1].strip() if len(parts) > 1 else ""
    return ParsedCommand(name=token.lower(), token=token, tail=tail, args=tail.split())


def parse_task_id(arg: str | None) -> int:
    """Positive decimal integer, or ValidationError (distinct from not-found)."""
    if arg is None or not _ID_RE.fullmatch(arg) or int(arg) <= 0:
        raise ValidationError("Please provide a valid numeric id.")
    return int(arg)


def info(label: str, text: str, *, done: bool = False) -> Message:
    return Message(MessageCategory.INFO, label, text, done)


def success(label: str, text: str) -> Message:
    return Message(MessageCategory.SUCCESS, label, text)


def warning(label: str, text: str) -> Message:
    return Message(MessageCategory.WARNING, label, text)


def error(text: str) -> Message:
    return Message(MessageCategory.ERROR, "error", text)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    usage: str
    help_text: str
    aliases: tuple[str, ...] = ()


class CommandRegistry:
    """Command table used by connectors (help, add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._specs: list[CommandSpec] = []

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._specs.append(
            CommandSpec(
                name=key,
                handler=handler,
                usage=usage or key,
                help_text=help_text,
                aliases=tuple(a.lower() for a in aliases),
            )
        )
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def handle(self, store: TaskStore, line: str) -> list[Message]:
        """
        Handle one input line against `store`.

        Returns the messages to render; an empty line gives no messages.
        Expected errors (TodoError) never escape: they become error messages.
        """
        cmd = parse_command(line)
        if cmd is None:
            return []

        try:
            handler = self._handlers.get(cmd.name)
            if handler is None:
                raise UnknownCommandError(cmd.token)
            return handler(store, cmd)
        except TodoError as e:
            logger.debug("Command %r failed: %s", cmd.name, e)
            return [error(str(e))]

    def build_help(self) -> list[Message]:
        width = max((len(s.usage) for s in self._specs), default=0)
        return [info("help", f"{s.usage.ljust(width)}  {s.help_text}") for s in self._specs]


registry = CommandRegistry()


def cmd_help(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    return registry.build_help()


def cmd_add(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    task = store.add(cmd.tail)
    return [success("added", task.title)]


def render_task_list(store: TaskStore) -> list[Message]:
    tasks = store.tasks()
    if not tasks:
        return [info("list", "No tasks")]
    return [info("list", f"{t.id}. {t.title}", done=t.done) for t in tasks]


def cmd_list(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    return render_task_list(store)


def _set_done(store: TaskStore, cmd: ParsedCommand, done: bool) -> list[Message]:
    task_id = parse_task_id(cmd.args[0] if cmd.args else None)
    task = store.set_done(task_id, done)
    return [success("ok", f"Task {task.id} {'completed' if done else 'reopened'}.")]


def cmd_done(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    return _set_done(store, cmd, True)


def cmd_undone(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    return _set_done(store, cmd, False)


def cmd_edit(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    """
    edit <id> <text>

    The text is everything after the id token, internal whitespace preserved.
    """
    if not cmd.args:
        raise ValidationError("Usage: edit <id> <text>")
    id_arg = cmd.args[0]
    task_id = parse_task_id(id_arg)
    # tail is stripped, so it always starts with the id token
    text = cmd.tail[len(id_arg):]
    task = store.edit(task_id, text)
    return [success("edited", f"{task.id}. {task.title}")]


def cmd_remove(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    task_id = parse_task_id(cmd.args[0] if cmd.args else None)
    task = store.remove(task_id)
    return [success("removed", f"Task {task.id}")]


def cmd_clear(store: TaskStore, cmd: ParsedCommand) -> list[Message]:
    store.clear()
    return [warning("cleared", "All tasks deleted.")]


registry.register("help", cmd_help, help_text="Show this help", aliases=["?"])
registry.register("add", cmd_add, help_text="Add a new task", usage="add <text>")
registry.register("list", cmd_list, help_text="Show all tasks", aliases=["ls"])
registry.register("done", cmd_done, help_text="Mark a task as done", usage="done <id>")
registry.register(
    "undone", cmd_undone, help_text="Mark a task as not done", usage="undone <id>", aliases=["open"]
)
registry.register("edit", cmd_edit, help_text="Change task text", usage="edit <id> <text>")
registry.register(
    "remove", cmd_remove, help_text="Delete a task", usage="remove <id>", aliases=["rm", "delete"]
)
registry.register("clear", cmd_clear, help_text="Delete all tasks")
