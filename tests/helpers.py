from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from mdbook_git.errors import ResolutionError

ROOT = Path(__file__).resolve().parents[1]

LIB_V1 = "line0\nline1\nline2\nline3\nline4\n"
LIB_V2 = "line0\nline1\nLINE2\nline3\nline4\nline5\n"


def run_mdbook_git(*args: str, stdin: str = "", cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH", "")]))
    env.setdefault("RUN_ID", "pytest-run")
    return subprocess.run(
        [sys.executable, "-m", "mdbook_git.cli", *args],
        cwd=(cwd or ROOT),
        env=env,
        input=stdin,
        text=True,
        capture_output=True,
        check=False,
    )


class FakeRepository:
    """In-memory stand-in for `GitRepository`."""

    def __init__(
        self,
        files: dict[tuple[str, str], str] | None = None,
        patches: dict[tuple[str, str, str], str] | None = None,
    ) -> None:
        self.files = files or {}
        self.patches = patches or {}
        self.patch_calls: list[tuple[str, str, str, int | None]] = []

    def fetch_file(self, revision: str, path: str) -> str:
        try:
            return self.files[(revision, path)]
        except KeyError as exc:
            raise ResolutionError(f"no {path} at {revision}", revision=revision, path=path) from exc

    def fetch_patch(self, old: str, new: str, path: str, context_lines: int | None = None) -> str:
        self.patch_calls.append((old, new, path, context_lines))
        try:
            return self.patches[(old, new, path)]
        except KeyError as exc:
            raise ResolutionError(f"no patch for {path}", revision=f"{old}..{new}", path=path) from exc
