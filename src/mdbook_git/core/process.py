from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext


@dataclass(frozen=True)
class CommandResult:
    code: int
    raw_stdout: bytes
    stderr: str
    duration_ms: int

    @property
    def stdout(self) -> str:
        """Strict UTF-8 view of stdout; raises UnicodeDecodeError on invalid bytes."""
        return self.raw_stdout.decode("utf-8")

    @property
    def ok(self) -> bool:
        return self.code == 0


def run_command(
    cmd: list[str],
    cwd: Path,
    ctx: RunContext | None = None,
) -> CommandResult:
    started = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            check=False,
        )
        result = CommandResult(
            code=proc.returncode,
            raw_stdout=proc.stdout or b"",
            stderr=(proc.stderr or b"").decode("utf-8", errors="replace"),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    except FileNotFoundError as exc:
        result = CommandResult(
            code=127,
            raw_stdout=b"",
            stderr=str(exc),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    log_event(
        ctx,
        "debug",
        "process",
        "run-command",
        command=" ".join(cmd),
        cwd=str(cwd),
        code=result.code,
        duration_ms=result.duration_ms,
    )
    return result
