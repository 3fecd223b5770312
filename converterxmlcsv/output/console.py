"""Console output abstraction.

Services and commands print through ``ConsoleProtocol`` so the CLI can use
Rich in production and tests can capture output with ``MockConsole``.
Diagnostic lines go through ``debug`` and are only shown in verbose mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    BOLD = auto()
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for styled console output."""

    verbose: bool

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def debug(self, message: str) -> None:
        """Print a dimmed diagnostic line when verbose is enabled."""
        ...

    def newline(self) -> None: ...

    def table(self, title: str, columns: list[str], rows: list[tuple[str, ...]]) -> None: ...


class RichConsole:
    """Production console backed by Rich."""

    def __init__(self, *, verbose: bool = False) -> None:
        from rich.console import Console

        self.verbose = verbose
        self._console = Console(highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "bright_green",
            Style.ERROR: "bright_red",
            Style.WARNING: "bright_yellow",
            Style.INFO: "bright_cyan",
            Style.DIM: "dim",
            Style.BOLD: "bold",
            Style.HEADER: "bold bright_green",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self.print(message, Style.SUCCESS)

    def error(self, message: str) -> None:
        self._console.print("error: ", style="bright_red bold", end="", markup=False)
        self._console.print(message, style="bright_red", markup=False)

    def warning(self, message: str) -> None:
        self.print(message, Style.WARNING)

    def info(self, message: str) -> None:
        self.print(message, Style.INFO)

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)

    def debug(self, message: str) -> None:
        if self.verbose:
            self.print(message, Style.DIM)

    def newline(self) -> None:
        self._console.print()

    def table(self, title: str, columns: list[str], rows: list[tuple[str, ...]]) -> None:
        from rich.table import Table

        table = Table(title=title, title_justify="left")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*row)
        self._console.print(table)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that captures output for tests."""

    verbose: bool = False
    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def debug(self, message: str) -> None:
        if self.verbose:
            self.outputs.append(OutputRecord(message, Style.DIM))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def table(self, title: str, columns: list[str], rows: list[tuple[str, ...]]) -> None:
        self.outputs.append(OutputRecord(title, Style.HEADER))
        for row in rows:
            self.outputs.append(OutputRecord("  ".join(row), Style.DEFAULT))

    # Test helpers

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def has_success(self) -> bool:
        return any(o.style == Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
