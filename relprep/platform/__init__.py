"""Platform abstraction layer."""

from .process import (
    ProcessError,
    exit_status,
    run_silent,
)

__all__ = [
    "ProcessError",
    "exit_status",
    "run_silent",
]
