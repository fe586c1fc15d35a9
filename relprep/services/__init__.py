"""Application services."""

from .prep import ReleasePrepService
from .prep_errors import ExternalToolError, PrepError
from .prep_plan import CommandStep, PrepStep, StatusStep, build_plan

__all__ = [
    "CommandStep",
    "ExternalToolError",
    "PrepError",
    "PrepStep",
    "ReleasePrepService",
    "StatusStep",
    "build_plan",
]
