"""Typed configuration loading and access.

Configuration lives in the ``[tool.relprep]`` table of the project's
pyproject.toml. Every key is optional; the defaults reproduce the plain
release workflow:

    [tool.relprep]
    rooster-package = "rooster-blue>=0.0.7"
    preview-section = "preview"
    preview-changelog = "CHANGELOG-PREVIEW.md"
    lock-package = "uv"
    echo-commands = false

``RELPREP_ECHO`` in the environment overrides ``echo-commands``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "LockfileConfig",
    "RoosterConfig",
    "apply_env",
    "load_config",
    "DEFAULT_ROOSTER_PACKAGE",
    "DEFAULT_PREVIEW_SECTION",
    "DEFAULT_PREVIEW_CHANGELOG",
    "DEFAULT_LOCK_PACKAGE",
    "ECHO_ENV_VAR",
]

DEFAULT_ROOSTER_PACKAGE = "rooster-blue>=0.0.7"
DEFAULT_PREVIEW_SECTION = "preview"
DEFAULT_PREVIEW_CHANGELOG = "CHANGELOG-PREVIEW.md"
DEFAULT_LOCK_PACKAGE = "uv"

ECHO_ENV_VAR = "RELPREP_ECHO"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class RoosterConfig:
    """How the changelog tool is fetched and which section is split out."""

    package: str = DEFAULT_ROOSTER_PACKAGE
    preview_section: str = DEFAULT_PREVIEW_SECTION
    preview_changelog: str = DEFAULT_PREVIEW_CHANGELOG


@dataclass(frozen=True, slots=True)
class LockfileConfig:
    """The single dependency refreshed in the lockfile."""

    package: str = DEFAULT_LOCK_PACKAGE


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    rooster: RoosterConfig = field(default_factory=RoosterConfig)
    lockfile: LockfileConfig = field(default_factory=LockfileConfig)
    echo_commands: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed pyproject.toml mapping."""
        tool: StrDict = get_table(data, "tool") or {}
        table: StrDict = get_table(tool, "relprep") or {}

        echo = get_bool(table, "echo-commands")
        return cls(
            rooster=RoosterConfig(
                package=get_str(table, "rooster-package") or DEFAULT_ROOSTER_PACKAGE,
                preview_section=get_str(table, "preview-section") or DEFAULT_PREVIEW_SECTION,
                preview_changelog=get_str(table, "preview-changelog")
                or DEFAULT_PREVIEW_CHANGELOG,
            ),
            lockfile=LockfileConfig(
                package=get_str(table, "lock-package") or DEFAULT_LOCK_PACKAGE,
            ),
            echo_commands=bool(echo),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load configuration from a pyproject.toml file.

    A missing file is not an error: the defaults apply.

    Args:
        path: Path to pyproject.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    if not path.exists():
        return Ok(Config())

    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def apply_env(config: Config, environ: Mapping[str, str] | None = None) -> Config:
    """Return config with environment overrides applied."""
    env = os.environ if environ is None else environ
    echo = env.get(ECHO_ENV_VAR)
    if echo is None:
        return config
    return replace(config, echo_commands=echo.strip().lower() in _TRUTHY)
