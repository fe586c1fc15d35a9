"""Exit codes for failures that originate in the driver itself.

Failures of external tools are not listed here: their exit status is
propagated unchanged to the caller.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for driver-originated failures.

    - 2: Environment error (project root cannot be resolved)
    - 126: Tool found but could not be executed
    - 127: Tool not found
    - 130: Interrupted (Ctrl-C)
    """

    ENV_ERROR = 2
    TOOL_NOT_EXECUTABLE = 126
    TOOL_NOT_FOUND = 127
    INTERRUPTED = 130
