from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relprep.core.config import Config, apply_env, load_config
from relprep.core.project import Project, detect_project
from relprep.core.result import Err
from relprep.output.console import ConsoleProtocol, RichConsole
from relprep.output.errors import prep_error_exit_code, print_prep_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    config: Config
    console: ConsoleProtocol


def build_context(script: Path) -> CLIContext:
    console = RichConsole()

    project_result = detect_project(script)
    if isinstance(project_result, Err):
        print_prep_error(project_result.error, console)
        raise typer.Exit(code=prep_error_exit_code(project_result.error))
    project = project_result.value

    config = Config()
    config_result = load_config(project.pyproject_path)
    if isinstance(config_result, Err):
        console.warning(f"{config_result.error.message} (using defaults)")
    else:
        config = config_result.value

    return CLIContext(
        project=project,
        config=apply_env(config),
        console=console,
    )
