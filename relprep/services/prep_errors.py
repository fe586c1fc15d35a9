from __future__ import annotations

from dataclasses import dataclass

from ..core.project import PathResolutionError

_INSTALL_HINTS = {
    "uv": "Install uv: https://docs.astral.sh/uv/getting-started/installation/",
    "cargo": "Install the Rust toolchain: https://rustup.rs",
}


@dataclass(frozen=True, slots=True)
class ExternalToolError:
    """An external call exited non-zero or could not be started.

    ``exit_status`` is what the driver itself exits with.
    """

    step: str
    command: tuple[str, ...]
    exit_status: int
    spawn_error: str | None = None

    @property
    def tool(self) -> str:
        return self.command[0] if self.command else ""

    @property
    def message(self) -> str:
        if self.spawn_error is not None:
            return f"{self.tool}: {self.spawn_error}"
        return f"{self.step}: {self.tool} exited with status {self.exit_status}"

    @property
    def hint(self) -> str | None:
        if self.spawn_error is None:
            return None
        return _INSTALL_HINTS.get(self.tool)


PrepError = PathResolutionError | ExternalToolError
