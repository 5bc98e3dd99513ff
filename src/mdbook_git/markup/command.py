"""Parsing of `#git` token bodies into commands.

    {{ #git show <revision>:<path>[:<ranges>] }}
    {{ #git diff <old> <new> <path>[:<ranges>] [-U<n>] [-h] }}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from .ranges import RangeSet, parse_line_number, parse_path_and_ranges


@dataclass(frozen=True)
class ShowCommand:
    revision: str
    path: str
    ranges: RangeSet


@dataclass(frozen=True)
class DiffOptions:
    context_lines: int | None = None
    hide_header_and_deletion: bool = False

    @classmethod
    def from_flags(cls, flags: Iterable[str]) -> "DiffOptions":
        """Interpret diff flags; unknown flags are ignored.

        Raises ValueError when `-U` carries a non-numeric value.
        """
        flags = list(flags)
        context_lines = None
        context_flag = next((flag for flag in flags if flag.startswith("-U")), None)
        if context_flag is not None:
            context_lines = parse_line_number(context_flag[2:])
            if context_lines is None:
                raise ValueError(f"invalid context line count in {context_flag!r}")
        hide = any(flag.startswith("-h") for flag in flags)
        return cls(context_lines=context_lines, hide_header_and_deletion=hide)


@dataclass(frozen=True)
class DiffCommand:
    old_revision: str
    new_revision: str
    path: str
    ranges: RangeSet
    options: tuple[str, ...] = ()


Command = Union[ShowCommand, DiffCommand]


def is_flag(token: str) -> bool:
    return token.startswith("-")


def partition_flags(tokens: Iterable[str]) -> tuple[list[str], list[str]]:
    positional: list[str] = []
    flags: list[str] = []
    for token in tokens:
        (flags if is_flag(token) else positional).append(token)
    return positional, flags


def parse_command(body: str) -> Command | None:
    """Return the command described by a token body, or None when it is malformed."""
    positional, flags = partition_flags(body.split())
    if not positional:
        return None
    name, args = positional[0], positional[1:]
    if name == "show":
        if not args:
            return None
        revision, sep, path_and_ranges = args[0].partition(":")
        if not sep or not revision:
            return None
        path, ranges = parse_path_and_ranges(path_and_ranges)
        if not ranges:
            return None
        return ShowCommand(revision=revision, path=path, ranges=ranges)
    if name == "diff":
        if len(args) != 3:
            return None
        old, new, path_and_ranges = args
        if not old or not new:
            return None
        path, ranges = parse_path_and_ranges(path_and_ranges)
        if not ranges:
            return None
        return DiffCommand(old_revision=old, new_revision=new, path=path, ranges=ranges, options=tuple(flags))
    return None
