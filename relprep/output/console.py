"""Console output abstraction.

Services print through ``ConsoleProtocol`` so they never depend on Rich
directly and tests can capture output with ``MockConsole``.

Status lines go to stdout verbatim. Diagnostics (errors, warnings, echoed
commands) go to stderr so they never mix with the status contract.
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
    ERROR = auto()
    WARNING = auto()
    DIM = auto()  # hints, echoed commands

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message to stdout, literally (no markup interpretation)."""
        ...

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        ...

    def trace(self, message: str) -> None:
        """Print a dimmed diagnostic line (hints, echoed commands) to stderr."""
        ...


class RichConsole:
    """Console implementation using the Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._out = Console(highlight=False, soft_wrap=True)
        self._err = Console(stderr=True, highlight=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._out.print(message, style=rich_style, markup=False)
        else:
            self._out.print(message, markup=False)

    def error(self, message: str) -> None:
        self._err.print("[red bold]error:[/red bold] ", end="")
        self._err.print(message, markup=False)

    def warning(self, message: str) -> None:
        self._err.print("[yellow]warning:[/yellow] ", end="")
        self._err.print(message, markup=False)

    def trace(self, message: str) -> None:
        self._err.print(message, style="dim", markup=False)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    stderr: bool = False


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, stderr=True))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING, stderr=True))

    def trace(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.DIM, stderr=True))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """All output messages, stdout and stderr, in order."""
        return [o.message for o in self.outputs]

    @property
    def stdout_messages(self) -> list[str]:
        return [o.message for o in self.outputs if not o.stderr]

    @property
    def stderr_messages(self) -> list[str]:
        return [o.message for o in self.outputs if o.stderr]

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)
