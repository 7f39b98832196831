"""Console output abstraction.

Release phases report progress through ``ConsoleProtocol`` so the
orchestrator never depends on Rich directly and tests can capture output
with ``MockConsole``.
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
    SUCCESS = auto()  # green
    ERROR = auto()  # red bold, "error:" prefix
    WARNING = auto()
    INFO = auto()
    DIM = auto()
    STEP = auto()  # cyan phase announcement
    DRY_RUN = auto()  # blue "[dryrun]" line
    SKIPPED = auto()  # red, tolerated skip

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Interface for styled output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def step(self, message: str) -> None:
        """Announce a release phase, preceded by a blank line."""
        ...

    def newline(self) -> None: ...


class RichConsole:
    """Production console backed by Rich."""

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.STEP: "cyan",
            Style.DRY_RUN: "blue",
            Style.SKIPPED: "red",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        # Command lines and versions can contain "[...]"; never parse markup here.
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(message, style="green", markup=False)

    def error(self, message: str) -> None:
        self._console.print("error: ", style="red bold", end="")
        self._console.print(message, markup=False)

    def warning(self, message: str) -> None:
        self._console.print("warning: ", style="yellow", end="")
        self._console.print(message, markup=False)

    def info(self, message: str) -> None:
        self._console.print("info: ", style="cyan", end="")
        self._console.print(message, markup=False)

    def step(self, message: str) -> None:
        self._console.print()
        self._console.print(message, style="cyan", markup=False)

    def newline(self) -> None:
        self._console.print()


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

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def step(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.STEP))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def styled(self, style: Style) -> list[str]:
        """Messages printed with a specific style, in order."""
        return [o.message for o in self.outputs if o.style == style]
