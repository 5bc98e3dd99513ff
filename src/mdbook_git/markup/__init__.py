"""The `{{ #git ... }}` markup language: scanning, parsing, resolving and rewriting."""

from __future__ import annotations

from .annotate import COMMENT_MARKER, comment_out_unselected, prefix_lines, split_lines
from .command import Command, DiffCommand, DiffOptions, ShowCommand, parse_command
from .ranges import FULL_RANGE, Bound, LineRange, RangeSet, parse_path_and_ranges, parse_range, parse_range_expr
from .resolver import ContentResolver, Repository
from .rewrite import RewriteStats, rewrite, rewrite_with_stats
from .scanner import TokenMatch, find_tokens

__all__ = [
    "COMMENT_MARKER",
    "Bound",
    "Command",
    "ContentResolver",
    "DiffCommand",
    "DiffOptions",
    "FULL_RANGE",
    "LineRange",
    "RangeSet",
    "Repository",
    "RewriteStats",
    "ShowCommand",
    "TokenMatch",
    "comment_out_unselected",
    "find_tokens",
    "parse_command",
    "parse_path_and_ranges",
    "parse_range",
    "parse_range_expr",
    "prefix_lines",
    "rewrite",
    "rewrite_with_stats",
    "split_lines",
]
