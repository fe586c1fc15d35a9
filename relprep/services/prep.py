"""Release preparation service.

Runs the plan from ``prep_plan`` strictly in order inside the project root.
The first failing external call stops the sequence; files already rewritten
by earlier calls are left as they are.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from ..core.config import Config
from ..core.project import Project
from ..core.result import Err, Ok, Result
from ..output.console import ConsoleProtocol
from ..platform.process import run_silent
from .prep_errors import ExternalToolError
from .prep_plan import CommandStep, StatusStep, build_plan


class ReleasePrepService:
    """Update both changelogs and the lockfile for a release."""

    def __init__(
        self,
        *,
        project: Project,
        config: Config,
        console: ConsoleProtocol,
    ) -> None:
        self._project = project
        self._config = config
        self._console = console

    def run(self, args: Sequence[str]) -> Result[None, ExternalToolError]:
        """Run every step, stopping at the first failure.

        Returns:
            Ok(None) when all three external calls succeeded
            Err(ExternalToolError) for the first call that did not
        """
        for step in build_plan(args, self._config):
            match step:
                case StatusStep(message=message):
                    self._console.print(message)
                case CommandStep():
                    result = self._run_command(step)
                    if isinstance(result, Err):
                        return result
        return Ok(None)

    def _run_command(self, step: CommandStep) -> Result[None, ExternalToolError]:
        if self._config.echo_commands:
            self._console.trace(f"+ {shlex.join(step.command)}")

        result = run_silent(list(step.command), cwd=self._project.root)
        if isinstance(result, Err):
            error = result.error
            return Err(
                ExternalToolError(
                    step=step.name,
                    command=step.command,
                    exit_status=error.exit_status,
                    spawn_error=error.spawn_error,
                )
            )
        return Ok(None)
