"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relprep.core.errors import ErrorCode
from relprep.core.project import PathResolutionError
from relprep.services.prep_errors import ExternalToolError, PrepError

if TYPE_CHECKING:
    from relprep.output.console import ConsoleProtocol

__all__ = ["print_prep_error", "prep_error_exit_code"]


def print_prep_error(error: PrepError, console: ConsoleProtocol) -> None:
    """Print a driver failure.

    A tool that ran and failed has already printed its own diagnostics,
    so nothing is added for it.
    """
    match error:
        case PathResolutionError():
            console.error(error.message)
        case ExternalToolError(spawn_error=None):
            pass
        case ExternalToolError():
            console.error(error.message)
            if error.hint:
                console.trace(f"hint: {error.hint}")


def prep_error_exit_code(error: PrepError) -> int:
    """Get the driver's exit code for a failure."""
    match error:
        case PathResolutionError():
            return int(ErrorCode.ENV_ERROR)
        case ExternalToolError(exit_status=status):
            return status
