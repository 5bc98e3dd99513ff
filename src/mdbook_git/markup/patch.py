"""Classification of unified-diff lines as produced by `git diff`."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .annotate import prefix_lines, split_lines

HUNK_RE = re.compile(r"^@@ -\d+(?:,(\d+))? \+\d+(?:,(\d+))? @@")


class LineKind(str, Enum):
    ADDITION = "addition"
    DELETION = "deletion"
    CONTEXT = "context"
    HEADER = "header"


@dataclass(frozen=True)
class PatchLine:
    kind: LineKind
    text: str


def classify_patch(patch: str) -> list[PatchLine]:
    out: list[PatchLine] = []
    old_left = 0
    new_left = 0
    for line in split_lines(patch):
        if old_left > 0 or new_left > 0:
            marker = line[:1]
            if marker == "+":
                new_left -= 1
                out.append(PatchLine(LineKind.ADDITION, line))
                continue
            if marker == "-":
                old_left -= 1
                out.append(PatchLine(LineKind.DELETION, line))
                continue
            if marker == " " or line == "":
                old_left -= 1
                new_left -= 1
                out.append(PatchLine(LineKind.CONTEXT, line))
                continue
            if marker == "\\":
                out.append(PatchLine(LineKind.HEADER, line))
                continue
            # truncated hunk; fall back to header scanning
            old_left = new_left = 0
        hunk = HUNK_RE.match(line)
        if hunk:
            old_left = int(hunk.group(1)) if hunk.group(1) is not None else 1
            new_left = int(hunk.group(2)) if hunk.group(2) is not None else 1
        out.append(PatchLine(LineKind.HEADER, line))
    return out


def render_patch(lines: list[PatchLine], hide_header_and_deletion: bool = False) -> str:
    """Join classified lines; in hide mode, headers and deletions are commented out."""
    texts = [line.text for line in lines]
    if hide_header_and_deletion:
        texts = prefix_lines(
            texts,
            lambda index, _text: lines[index].kind not in (LineKind.ADDITION, LineKind.CONTEXT),
        )
    return "\n".join(texts)
