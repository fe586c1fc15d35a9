"""Blocking subprocess execution with Result-based error handling.

External tools run with the terminal's standard streams inherited, so their
output reaches the user unmodified. The driver only inspects exit status.

Usage:
    result = run_silent(["cargo", "update", "-p", "uv"], cwd=project.root)
    match result:
        case Ok(_):
            pass
        case Err(error):
            raise SystemExit(error.exit_status)
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from relprep.core.errors import ErrorCode
from relprep.core.result import Err, Ok, Result

__all__ = ["ProcessError", "exit_status", "run_silent"]

# Shell convention: a child killed by signal N reports 128 + N.
_SIGNAL_BASE = 128


def exit_status(returncode: int) -> int:
    """Map a ``Popen.returncode`` to the status a shell would report."""
    if returncode < 0:
        return _SIGNAL_BASE - returncode
    return returncode


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code of the process (negative when killed by a signal).
        spawn_error: Set when the process could not be started at all.
    """

    command: tuple[str, ...]
    returncode: int
    spawn_error: str | None = None

    @property
    def exit_status(self) -> int:
        return exit_status(self.returncode)


def run_silent(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
) -> Result[None, ProcessError]:
    """Execute a command and wait for it, streaming its output to the terminal.

    No timeout is applied: the call blocks until the process exits.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            check=False,
        )
    except FileNotFoundError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=int(ErrorCode.TOOL_NOT_FOUND),
                spawn_error=e.strerror or str(e),
            )
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=int(ErrorCode.TOOL_NOT_EXECUTABLE),
                spawn_error=e.strerror or str(e),
            )
        )

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
