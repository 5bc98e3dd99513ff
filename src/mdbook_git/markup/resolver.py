from __future__ import annotations

from typing import Protocol

from ..errors import ResolutionError
from .annotate import comment_out_unselected
from .command import Command, DiffCommand, DiffOptions, ShowCommand
from .patch import classify_patch, render_patch


class Repository(Protocol):
    def fetch_file(self, revision: str, path: str) -> str: ...

    def fetch_patch(self, old: str, new: str, path: str, context_lines: int | None = None) -> str: ...


class ContentResolver:
    """Turn a parsed command into the text that replaces its token."""

    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def resolve(self, command: Command) -> str:
        if isinstance(command, ShowCommand):
            return self.show(command)
        if isinstance(command, DiffCommand):
            return self.diff(command)
        raise TypeError(f"unsupported command: {command!r}")

    def show(self, command: ShowCommand) -> str:
        text = self.repository.fetch_file(command.revision, command.path)
        return comment_out_unselected(text, command.ranges)

    def diff(self, command: DiffCommand) -> str:
        try:
            options = DiffOptions.from_flags(command.options)
        except ValueError as exc:
            raise ResolutionError(str(exc), path=command.path) from exc
        patch = self.repository.fetch_patch(
            command.old_revision,
            command.new_revision,
            command.path,
            options.context_lines,
        )
        rendered = render_patch(classify_patch(patch), options.hide_header_and_deletion)
        return comment_out_unselected(rendered, command.ranges)
