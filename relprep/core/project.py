"""Project root detection.

The project root is the parent of the directory holding the running driver
script (``<root>/scripts/release.py`` resolves to ``<root>``). It is resolved
once per invocation, before anything else runs, and every external command
executes there regardless of the caller's working directory.

``RELPREP_PROJECT_ROOT`` replaces the script-relative lookup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "PROJECT_ROOT_ENV_VAR",
    "PathResolutionError",
    "Project",
    "detect_project",
    "resolve_project_root",
]

PROJECT_ROOT_ENV_VAR = "RELPREP_PROJECT_ROOT"


@dataclass(frozen=True, slots=True)
class PathResolutionError:
    """The driver's own location (or the override) cannot be canonicalised."""

    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"cannot resolve project root from {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class Project:
    """A resolved project root."""

    root: Path

    @property
    def pyproject_path(self) -> Path:
        """Path to pyproject.toml (holds the [tool.relprep] table)."""
        return self.root / "pyproject.toml"


def resolve_project_root(script: Path) -> Result[Project, PathResolutionError]:
    """Resolve the project root from the running script's path.

    The script path is canonicalised (symlinks followed, must exist), then
    the parent of its containing directory is returned.
    """
    try:
        resolved = script.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        return Err(PathResolutionError(path=script, reason=str(e) or type(e).__name__))

    return Ok(Project(root=resolved.parent.parent))


def detect_project(
    script: Path,
    environ: Mapping[str, str] | None = None,
) -> Result[Project, PathResolutionError]:
    """Resolve the project root, honouring the RELPREP_PROJECT_ROOT override."""
    env = os.environ if environ is None else environ
    override = env.get(PROJECT_ROOT_ENV_VAR, "").strip()
    if not override:
        return resolve_project_root(script)

    path = Path(override).expanduser()
    try:
        root = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        return Err(PathResolutionError(path=path, reason=str(e) or type(e).__name__))

    if not root.is_dir():
        return Err(PathResolutionError(path=path, reason="not a directory"))
    return Ok(Project(root=root))
