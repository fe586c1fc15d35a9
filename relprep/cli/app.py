from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from relprep.cli.context import build_context
from relprep.core.errors import ErrorCode
from relprep.core.result import Err
from relprep.output.errors import prep_error_exit_code, print_prep_error
from relprep.services.prep import ReleasePrepService


app = typer.Typer(add_completion=False)


@dataclass(frozen=True, slots=True)
class Invocation:
    """The driver script being run and its raw, unparsed arguments."""

    script: Path
    args: tuple[str, ...]


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        # --help belongs to rooster
        "help_option_names": [],
    }
)
def prepare(ctx: typer.Context) -> None:
    """Prepare for a release.

    All arguments are passed to `rooster release`.
    """
    invocation: Invocation = ctx.obj
    cli = build_context(invocation.script)
    service = ReleasePrepService(project=cli.project, config=cli.config, console=cli.console)

    try:
        result = service.run(invocation.args)
    except KeyboardInterrupt:
        raise typer.Exit(code=int(ErrorCode.INTERRUPTED))

    if isinstance(result, Err):
        print_prep_error(result.error, cli.console)
        raise typer.Exit(code=prep_error_exit_code(result.error))


def main(script: Path, argv: Sequence[str] | None = None) -> None:
    """Run the driver for ``script``; the project root is its parent directory's parent.

    ``ctx.args`` is not used for forwarding since the parser drops a bare ``--``.
    """
    args = tuple(sys.argv[1:] if argv is None else argv)
    app(args=list(args), prog_name=script.name, obj=Invocation(script=script, args=args))
