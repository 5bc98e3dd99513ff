from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..contracts.validate import PREPROCESSOR_CONFIG, validate
from ..core.context import RunContext
from ..core.git import GitRepository
from .protocol import PreprocessorContext


@dataclass(frozen=True)
class GitConfig:
    """The `[preprocessor.git]` table of `book.toml`."""

    path: str | None = None

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> "GitConfig":
        validate(PREPROCESSOR_CONFIG, table)
        path = table.get("path")
        return cls(path=str(path) if path is not None else None)

    def repository_path(self, root: Path) -> Path | None:
        """Absolute repository location, or None when unset or missing on disk."""
        if self.path is None:
            return None
        candidate = (root / self.path).resolve()
        return candidate if candidate.exists() else None


def open_repository(ctx: PreprocessorContext, cfg: GitConfig, run_ctx: RunContext | None = None) -> GitRepository | None:
    path = cfg.repository_path(ctx.root)
    if path is None:
        return None
    return GitRepository.open(path, run_ctx)
