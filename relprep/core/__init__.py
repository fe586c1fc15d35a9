"""Core domain types and logic."""

from .config import Config, ConfigError, apply_env, load_config
from .errors import ErrorCode
from .project import PathResolutionError, Project, detect_project, resolve_project_root
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "apply_env",
    "load_config",
    # errors
    "ErrorCode",
    # project
    "PathResolutionError",
    "Project",
    "detect_project",
    "resolve_project_root",
    # result
    "Err",
    "Ok",
    "Result",
]
