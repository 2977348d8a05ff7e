# src/lumina/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core import parser
from ..core.errors import LuminaError
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "Oh no! I don't know what to do with this command!"
INTERNAL_ERROR_MESSAGE = "Internal error while handling a command."
SAVE_FAILED_MESSAGE = "Warning: Lumina could not save your tasks to disk!"


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    exit: bool = False


CommandHandler = Callable[[AppState, list[str]], Reply]


class CommandRegistry:
    """
    Keyword command registry used by connectors (list, todo, mark, ...).

    Dispatch is on the first token of the line only, matched exactly
    (case-insensitive); a keyword appearing later in the line never selects
    a command.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> Reply:
        """Process one command line and return the reply to show."""
        name, args = parser.split_command(line)

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command line: %r", line)
            return Reply(UNKNOWN_COMMAND_MESSAGE)

        try:
            return handler(state, args)
        except LuminaError as e:
            logger.debug("Command %s rejected: %s", name, e)
            return Reply(str(e))
        except Exception:
            logger.exception("Command handler crashed (command=%s).", name)
            return Reply(INTERNAL_ERROR_MESSAGE)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def greeting(app_name: str = "Lumina") -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def render_task_list(task_list: TaskList) -> str:
    lines = ["Here are the tasks in your list:"]
    for number, task in task_list.list_tasks():
        lines.append(f"{number}.{task}")
    return "\n".join(lines)


def _indent(state: AppState, text: str) -> str:
    width = int(getattr(state.settings, "indent_width", 2))
    return " " * width + text


def _persist(state: AppState, text: str) -> str:
    """Save after a mutation; a failed save is reported, not raised."""
    if state.task_store.save(state.task_list):
        return text
    return f"{text}\n{SAVE_FAILED_MESSAGE}"


def _add(state: AppState, task: Task) -> Reply:
    count = state.task_list.add_task(task)
    logger.debug("Added task #%d: %s", count, task.to_record())
    text = (
        "Got it. I've added this task:\n"
        f"{_indent(state, str(task))}\n"
        f"Now you have {count} tasks in the list."
    )
    return Reply(_persist(state, text))


def cmd_help(state: AppState, args: list[str]) -> Reply:
    parser.expect_no_args(args)
    return Reply(registry.build_help())


def cmd_bye(state: AppState, args: list[str]) -> Reply:
    parser.expect_no_args(args)
    return Reply("Bye. Hope to see you again soon!", exit=True)


def cmd_list(state: AppState, args: list[str]) -> Reply:
    parser.expect_no_args(args)
    return Reply(render_task_list(state.task_list))


def cmd_mark(state: AppState, args: list[str]) -> Reply:
    task = state.task_list.mark_done(parser.parse_index(args))
    text = f"Nice! I've marked this task as done:\n{_indent(state, str(task))}"
    return Reply(_persist(state, text))


def cmd_unmark(state: AppState, args: list[str]) -> Reply:
    task = state.task_list.mark_not_done(parser.parse_index(args))
    text = f"OK, I've marked this task as not done yet:\n{_indent(state, str(task))}"
    return Reply(_persist(state, text))


def cmd_delete(state: AppState, args: list[str]) -> Reply:
    task = state.task_list.delete_task(parser.parse_index(args))
    text = (
        "Noted. I've removed this task:\n"
        f"{_indent(state, str(task))}\n"
        f"Now you have {len(state.task_list)} tasks in the list."
    )
    return Reply(_persist(state, text))


def cmd_todo(state: AppState, args: list[str]) -> Reply:
    return _add(state, parser.parse_todo(args))


def cmd_deadline(state: AppState, args: list[str]) -> Reply:
    return _add(state, parser.parse_deadline(args))


def cmd_event(state: AppState, args: list[str]) -> Reply:
    return _add(state, parser.parse_event(args))


registry.register("help", cmd_help, help_text="Show available commands.")
registry.register("bye", cmd_bye, help_text="Exit.")
registry.register("list", cmd_list, help_text="Show all tasks.")
registry.register("mark", cmd_mark, help_text="Mark a task as done: mark <n>.")
registry.register("unmark", cmd_unmark, help_text="Mark a task as not done: unmark <n>.")
registry.register("delete", cmd_delete, help_text="Remove a task: delete <n>.")
registry.register("todo", cmd_todo, help_text="Add a to-do: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <when>."
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <description> /from <start> /to <end>.",
)
