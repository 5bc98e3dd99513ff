"""Line-range selectors.

A selector follows the path of a `show`/`diff` target::

    src/lib.rs            every line
    src/lib.rs:3          line 3 only
    src/lib.rs:3:         line 3 to the end
    src/lib.rs::7         start up to (not including) line 7
    src/lib.rs:3:7        lines 3, 4, 5, 6
    src/lib.rs:[2,4:8,16:]  any of the above, combined

Line indices are 0-based.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Literal

BoundKind = Literal["unbounded", "included", "excluded"]

_LINE_NUMBER_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Bound:
    kind: BoundKind
    value: int = 0

    @classmethod
    def included(cls, value: int) -> "Bound":
        return cls("included", value)

    @classmethod
    def excluded(cls, value: int) -> "Bound":
        return cls("excluded", value)

    def admits_low(self, index: int) -> bool:
        if self.kind == "unbounded":
            return True
        return index >= self.value if self.kind == "included" else index > self.value

    def admits_high(self, index: int) -> bool:
        if self.kind == "unbounded":
            return True
        return index <= self.value if self.kind == "included" else index < self.value


UNBOUNDED = Bound("unbounded")


@dataclass(frozen=True)
class LineRange:
    low: Bound
    high: Bound

    def __contains__(self, index: int) -> bool:
        return self.low.admits_low(index) and self.high.admits_high(index)


RangeSet = tuple[LineRange, ...]

FULL_RANGE = LineRange(UNBOUNDED, UNBOUNDED)


def selects(ranges: Iterable[LineRange], index: int) -> bool:
    return any(index in r for r in ranges)


def parse_line_number(raw: str) -> int | None:
    if not _LINE_NUMBER_RE.fullmatch(raw):
        return None
    return int(raw)


def parse_range(expr: str) -> LineRange | None:
    """Parse one selector (`N`, `:`, `N:`, `:N`, `N:M`); None when malformed."""
    parts = expr.split(":")
    if len(parts) == 1:
        line = parse_line_number(parts[0])
        if line is None:
            return None
        return LineRange(Bound.included(line), Bound.included(line))
    if len(parts) != 2:
        return None
    start, end = parts
    low = UNBOUNDED
    high = UNBOUNDED
    if start:
        start_line = parse_line_number(start)
        if start_line is None:
            return None
        low = Bound.included(start_line)
    if end:
        end_line = parse_line_number(end)
        if end_line is None:
            return None
        high = Bound.excluded(end_line)
    return LineRange(low, high)


def parse_range_expr(expr: str) -> RangeSet:
    """Parse a single selector or a bracketed list of them.

    Malformed list entries are dropped; an empty result means nothing valid was found.
    """
    if len(expr) >= 2 and expr.startswith("[") and expr.endswith("]"):
        parsed = (parse_range(piece.strip()) for piece in expr[1:-1].split(","))
        return tuple(r for r in parsed if r is not None)
    single = parse_range(expr)
    return () if single is None else (single,)


def parse_path_and_ranges(value: str) -> tuple[str, RangeSet]:
    path, sep, expr = value.partition(":")
    if not sep:
        return path, (FULL_RANGE,)
    return path, parse_range_expr(expr)
