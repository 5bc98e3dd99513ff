from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

from .clock import utc_now

LogLevel = Literal["debug", "info", "warning", "error"]

LOG_LEVELS: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RunContext:
    run_id: str
    log_level: LogLevel
    log_json: bool
    quiet: bool

    def enabled(self, level: str) -> bool:
        if self.quiet and LOG_LEVELS.get(level, 0) < LOG_LEVELS["error"]:
            return False
        return LOG_LEVELS.get(level, 0) >= LOG_LEVELS[self.log_level]

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        default_run = f"mdbook-git-{utc_now().strftime('%Y%m%d-%H%M%S')}-{os.getpid()}"
        resolved_run_id = run_id or os.environ.get("RUN_ID", default_run)
        env_level = os.environ.get("MDBOOK_GIT_LOG_LEVEL", "info").strip().lower()
        if verbose:
            env_level = "debug"
        elif env_level not in LOG_LEVELS:
            env_level = "info"
        return cls(
            run_id=resolved_run_id,
            log_level=env_level,  # type: ignore[arg-type]
            log_json=log_json or _env_flag("MDBOOK_GIT_LOG_JSON"),
            quiet=quiet,
        )
