"""Command-line entry point: list, add and complete tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from taskman.jsonstorage import JsonStorage
from taskman.printers import Printer, TablePrint
from taskman.service import TasksService

LIST_COMMAND = "list"
ADD_COMMAND = "add"
COMPLETE_COMMAND = "complete"
_COMMANDS = (LIST_COMMAND, ADD_COMMAND, COMPLETE_COMMAND)

DEFAULT_DB_PATH = Path("internal/database/jsonstorage/data/db.json")


class CommandError(Exception):
    """Raised when the command line names no subcommand or an unknown one."""


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``list``, ``add`` and ``complete`` subcommands."""
    parser = argparse.ArgumentParser(prog="taskman", description="Manage a list of tasks.")
    commands = parser.add_subparsers(dest="command", metavar="command")

    list_parser = commands.add_parser(LIST_COMMAND, help="show all tasks")

    add_parser = commands.add_parser(ADD_COMMAND, help="add a new task")
    add_parser.add_argument("-title", "--title", default="", help="title of the task")

    complete_parser = commands.add_parser(COMPLETE_COMMAND, help="mark a task as completed")
    complete_parser.add_argument("-id", "--id", default="", help="id of the task")
    complete_parser.add_argument(
        "-u", "--u", action="store_true", help="mark the task as not completed instead"
    )

    for sub in (list_parser, add_parser, complete_parser):
        sub.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    return parser


class TaskManager:
    """Dispatches a command line to the task service and shows the result."""

    def __init__(self, service: TasksService, printer: Printer) -> None:
        self.service = service
        self.printer = printer
        self._parser = build_parser()

    def run(self, argv: Sequence[str]) -> None:
        """Run the subcommand in ``argv`` (the arguments after the program name).

        Raises CommandError for a missing or unknown subcommand and ValueError
        for an invalid task id.
        """
        args = list(argv)
        if not args:
            raise CommandError("expected subcommand, get none")
        if args[0] not in _COMMANDS:
            raise CommandError(f"get unexpected subcommand: {args[0]}")

        parsed = self._parser.parse_args(args)
        if parsed.command == LIST_COMMAND:
            self.printer.print_table(self.service.get_all())
        elif parsed.command == ADD_COMMAND:
            self.printer.print_entry(self.service.put(parsed.title))
        else:
            self.printer.print_entry(self.service.mark_task(parsed.id, not parsed.u))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the task manager on the JSON database; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        service = TasksService(JsonStorage(DEFAULT_DB_PATH))
        TaskManager(service, TablePrint()).run(args)
    except (CommandError, ValueError, OSError) as exc:
        print(f"taskman: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())