from __future__ import annotations

from pathlib import Path

import pytest

from relprep.core.config import Config
from relprep.core.project import Project
from relprep.core.result import Err, Ok, Result
from relprep.output.console import MockConsole
from relprep.platform.process import ProcessError
from relprep.services import prep as prep_mod
from relprep.services.prep import ReleasePrepService
from relprep.services.prep_errors import ExternalToolError


def _install_fake_run(
    monkeypatch: pytest.MonkeyPatch,
    calls: list[tuple[list[str], Path]],
    console: MockConsole,
    *,
    fail_at: int | None = None,
    returncode: int = 1,
    spawn_error: str | None = None,
) -> None:
    def fake_run_silent(
        cmd: list[str],
        cwd: Path,
        env: dict[str, str] | None = None,
    ) -> Result[None, ProcessError]:
        # record the console position so ordering against status lines is visible
        console.print(f"<call {len(calls)}>")
        calls.append((cmd, cwd))
        if fail_at is not None and len(calls) - 1 == fail_at:
            return Err(ProcessError(command=tuple(cmd), returncode=returncode, spawn_error=spawn_error))
        return Ok(None)

    monkeypatch.setattr(prep_mod, "run_silent", fake_run_silent)


def _service(tmp_path: Path, console: MockConsole, config: Config | None = None) -> ReleasePrepService:
    return ReleasePrepService(project=Project(root=tmp_path), config=config or Config(), console=console)


def test_runs_all_steps_in_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console)

    result = _service(tmp_path, console).run(["--dry-run"])

    assert result == Ok(None)
    assert console.messages == [
        "Updating metadata with rooster...",
        "<call 0>",
        "<call 1>",
        "Updating lockfile...",
        "<call 2>",
    ]
    assert [cmd[-1] for cmd, _ in calls] == ["--no-update-version-files", "preview", "uv"]
    assert all(cwd == tmp_path for _, cwd in calls)
    assert "--dry-run" in calls[0][0]
    assert "--dry-run" in calls[1][0]
    assert "--dry-run" not in calls[2][0]


def test_preview_failure_stops_sequence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console, fail_at=0, returncode=3)

    result = _service(tmp_path, console).run([])

    assert isinstance(result, Err)
    assert result.error.step == "preview changelog"
    assert result.error.exit_status == 3
    assert len(calls) == 1
    assert console.messages == ["Updating metadata with rooster...", "<call 0>"]


def test_main_changelog_failure_skips_lockfile(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console, fail_at=1, returncode=2)

    result = _service(tmp_path, console).run([])

    assert isinstance(result, Err)
    assert result.error.step == "changelog"
    assert len(calls) == 2
    assert "Updating lockfile..." not in console.messages


def test_lockfile_failure_propagates_status(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console, fail_at=2, returncode=101)

    result = _service(tmp_path, console).run(["--dry-run"])

    assert isinstance(result, Err)
    assert result.error == ExternalToolError(
        step="lockfile",
        command=("cargo", "update", "-p", "uv"),
        exit_status=101,
    )
    assert len(calls) == 3


def test_signal_exit_status(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console, fail_at=0, returncode=-2)

    result = _service(tmp_path, console).run([])

    assert isinstance(result, Err)
    assert result.error.exit_status == 130


def test_missing_tool(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(
        monkeypatch, calls, console, fail_at=0, returncode=127, spawn_error="No such file or directory"
    )

    result = _service(tmp_path, console).run([])

    assert isinstance(result, Err)
    assert result.error.exit_status == 127
    assert result.error.tool == "uv"
    assert result.error.hint is not None


def test_echo_commands(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console)

    _service(tmp_path, console, Config(echo_commands=True)).run([])

    assert console.stderr_messages == [
        "+ uv tool run --from 'rooster-blue>=0.0.7' --isolated -- rooster release "
        "--only-sections preview --changelog-file CHANGELOG-PREVIEW.md "
        "--no-update-pyproject --no-update-version-files",
        "+ uv tool run --from 'rooster-blue>=0.0.7' --isolated -- rooster release "
        "--without-sections preview",
        "+ cargo update -p uv",
    ]


def test_no_echo_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    console = MockConsole()
    calls: list[tuple[list[str], Path]] = []
    _install_fake_run(monkeypatch, calls, console)

    _service(tmp_path, console).run([])

    assert console.stderr_messages == []
