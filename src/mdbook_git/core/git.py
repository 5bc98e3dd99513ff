"""Read-only access to a git repository through the git CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..errors import MdbookGitError, ResolutionError
from ..exit_codes import ERR_CONFIG
from .context import RunContext
from .process import CommandResult, run_command

# `diff.context` in user config must not change the hunks
DEFAULT_CONTEXT_LINES = 3


@dataclass(frozen=True)
class GitRepository:
    root: Path
    ctx: RunContext | None = None

    @classmethod
    def open(cls, path: Path, ctx: RunContext | None = None) -> "GitRepository":
        root = path.resolve()
        if not root.is_dir():
            raise MdbookGitError(f"could not find repository at {root}", ERR_CONFIG, "repository")
        res = run_command(["git", "rev-parse", "--git-dir"], root, ctx=ctx)
        if not res.ok:
            raise MdbookGitError(
                f"could not find repository at {root}: {res.stderr.strip()}",
                ERR_CONFIG,
                "repository",
            )
        return cls(root=root, ctx=ctx)

    def _git(self, *args: str) -> CommandResult:
        return run_command(["git", *args], self.root, ctx=self.ctx)

    def resolve_commit(self, revision: str) -> str:
        if not revision or revision.startswith("-"):
            raise ResolutionError(f"invalid revision {revision!r}", revision=revision)
        res = self._git("rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}")
        if not res.ok:
            raise ResolutionError(f"unknown revision {revision!r}", revision=revision)
        return res.stdout.strip()

    def fetch_file(self, revision: str, path: str) -> str:
        commit = self.resolve_commit(revision)
        object_name = f"{commit}:{path}"
        kind = self._git("cat-file", "-t", object_name)
        if not kind.ok:
            raise ResolutionError(f"{path} does not exist at {revision}", revision=revision, path=path)
        if kind.stdout.strip() != "blob":
            raise ResolutionError(f"{path} is not a file at {revision}", revision=revision, path=path)
        blob = self._git("cat-file", "blob", object_name)
        if not blob.ok:
            raise ResolutionError(f"could not read {path} at {revision}", revision=revision, path=path)
        try:
            return blob.stdout
        except UnicodeDecodeError as exc:
            raise ResolutionError(f"{path} at {revision} is not valid UTF-8", revision=revision, path=path) from exc

    def has_path(self, commit: str, path: str) -> bool:
        return self._git("cat-file", "-e", f"{commit}:{path}").ok

    def fetch_patch(self, old: str, new: str, path: str, context_lines: int | None = None) -> str:
        old_commit = self.resolve_commit(old)
        new_commit = self.resolve_commit(new)
        if not (self.has_path(old_commit, path) or self.has_path(new_commit, path)):
            raise ResolutionError(f"{path} exists in neither {old} nor {new}", revision=f"{old}..{new}", path=path)
        args = [
            "diff",
            "--no-color",
            "--no-ext-diff",
            "--no-textconv",
            "--no-renames",
            "--src-prefix=a/",
            "--dst-prefix=b/",
            f"--unified={DEFAULT_CONTEXT_LINES if context_lines is None else context_lines}",
        ]
        # pathspecs are cwd-relative; anchor them at the tree root like `<commit>:<path>`
        res = self._git(*args, old_commit, new_commit, "--", f":(top){path}")
        if not res.ok:
            raise ResolutionError(f"git diff failed for {path}: {res.stderr.strip()}", revision=f"{old}..{new}", path=path)
        try:
            return res.stdout
        except UnicodeDecodeError as exc:
            raise ResolutionError(f"patch for {path} is not valid UTF-8", revision=f"{old}..{new}", path=path) from exc
