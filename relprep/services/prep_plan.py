"""The ordered steps of a release preparation.

The plan is data: two status lines and three external calls, in the order
they must run. Forwarded arguments only reach the two changelog calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..core.config import Config

__all__ = [
    "CommandStep",
    "PrepStep",
    "StatusStep",
    "METADATA_STATUS",
    "LOCKFILE_STATUS",
    "build_plan",
    "lockfile_command",
    "rooster_command",
]

METADATA_STATUS = "Updating metadata with rooster..."
LOCKFILE_STATUS = "Updating lockfile..."


@dataclass(frozen=True, slots=True)
class StatusStep:
    message: str


@dataclass(frozen=True, slots=True)
class CommandStep:
    name: str
    command: tuple[str, ...]


PrepStep = StatusStep | CommandStep


def rooster_command(config: Config, args: Sequence[str], flags: Sequence[str]) -> tuple[str, ...]:
    """``rooster release`` in an isolated, version-pinned tool environment."""
    return (
        "uv",
        "tool",
        "run",
        "--from",
        config.rooster.package,
        "--isolated",
        "--",
        "rooster",
        "release",
        *args,
        *flags,
    )


def lockfile_command(config: Config) -> tuple[str, ...]:
    return ("cargo", "update", "-p", config.lockfile.package)


def build_plan(args: Sequence[str], config: Config) -> tuple[PrepStep, ...]:
    """Build the five-step release preparation plan.

    Args:
        args: Opaque arguments forwarded verbatim to both changelog calls.
        config: Tool package, section and lockfile settings.
    """
    forwarded = tuple(args)
    section = config.rooster.preview_section

    return (
        StatusStep(METADATA_STATUS),
        CommandStep(
            name="preview changelog",
            command=rooster_command(
                config,
                forwarded,
                (
                    "--only-sections",
                    section,
                    "--changelog-file",
                    config.rooster.preview_changelog,
                    "--no-update-pyproject",
                    "--no-update-version-files",
                ),
            ),
        ),
        CommandStep(
            name="changelog",
            command=rooster_command(config, forwarded, ("--without-sections", section)),
        ),
        StatusStep(LOCKFILE_STATUS),
        CommandStep(name="lockfile", command=lockfile_command(config)),
    )
