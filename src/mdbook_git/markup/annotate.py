from __future__ import annotations

from typing import Callable, Iterable

from .ranges import LineRange, selects

COMMENT_MARKER = "# "

LinePredicate = Callable[[int, str], bool]


def split_lines(text: str) -> list[str]:
    """Split on `\\n`, dropping one trailing `\\r` per line and the empty tail after a final newline."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def prefix_lines(lines: Iterable[str], predicate: LinePredicate, marker: str = COMMENT_MARKER) -> list[str]:
    """Prefix every line matching `predicate` with `marker`, unless it already carries it."""
    out: list[str] = []
    for index, line in enumerate(lines):
        if predicate(index, line) and not line.startswith(marker):
            line = marker + line
        out.append(line)
    return out


def comment_out_unselected(text: str, ranges: Iterable[LineRange]) -> str:
    ranges = tuple(ranges)
    return "\n".join(prefix_lines(split_lines(text), lambda index, _line: not selects(ranges, index)))
