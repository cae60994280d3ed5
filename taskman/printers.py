"""Output of tasks as indented JSON or as a text table."""

from __future__ import annotations

import json
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, TextIO

from taskman.entity import Task

_CHECKED = "\u2611"
_UNCHECKED = "\u2610"

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_HEADERS = ("ID", "Completed", "Title")
_PADDING = 2
_HEADER_STYLE = "\x1b[32;4m"
_FIRST_COLUMN_STYLE = "\x1b[33m"
_RESET = "\x1b[0m"


def to_checkbox(is_done: bool) -> str:
    """Return a ballot box, checked when ``is_done`` is true."""
    return _CHECKED if is_done else _UNCHECKED


class Printer(ABC):
    """Presents tasks and messages to the user."""

    @abstractmethod
    def print_table(self, tasks: Iterable[Task]) -> None:
        """Show a collection of tasks."""

    @abstractmethod
    def print_entry(self, task: Task) -> None:
        """Show a single task."""

    @abstractmethod
    def print_message(self, message: str) -> None:
        """Show a plain message."""


def _jsonable(value: Any) -> Any:
    if isinstance(value, Task):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


class PrettyPrint(Printer):
    """Writes tasks as indented JSON."""

    def __init__(self, indent: str = "    ", stream: TextIO | None = None) -> None:
        self.indent = indent
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def to_string(self, value: Any) -> str:
        """Return ``value`` (a task, a list of tasks or plain data) as indented JSON."""
        text = json.dumps(_jsonable(value), indent=self.indent, ensure_ascii=False)
        return text.translate(_JSON_ESCAPES)

    def print_table(self, tasks: Iterable[Task]) -> None:
        print(self.to_string(list(tasks)), file=self.stream)

    def print_entry(self, task: Task) -> None:
        print(self.to_string(task), file=self.stream)

    def print_message(self, message: str) -> None:
        print(message, file=self.stream)


class TablePrint(Printer):
    """Writes tasks as an aligned table with ID, Completed and Title columns.

    ``color`` forces ANSI styling on or off; when left as None it is used
    only if the output stream is a terminal.
    """

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _use_color(self) -> bool:
        if self._color is not None:
            return self._color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty is not None and isatty())

    def render(self, tasks: Iterable[Task]) -> str:
        """Return the table text for ``tasks``, one line per task after the header."""
        rows = [(str(task.id), to_checkbox(task.is_completed), task.text) for task in tasks]
        widths = [max(len(cell) + _PADDING for cell in column) for column in zip(_HEADERS, *rows)]
        color = self._use_color()

        header = "".join(cell.ljust(width) for cell, width in zip(_HEADERS, widths)) + "\n"
        lines = [f"{_HEADER_STYLE}{header}{_RESET}" if color else header]
        for row in rows:
            cells = [cell.ljust(width) for cell, width in zip(row, widths)]
            if color:
                cells[0] = f"{_FIRST_COLUMN_STYLE}{cells[0]}{_RESET}"
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def print_table(self, tasks: Iterable[Task]) -> None:
        self.stream.write(self.render(tasks))

    def print_entry(self, task: Task) -> None:
        self.print_table([task])

    def print_message(self, message: str) -> None:
        print(message, file=sys.stderr)