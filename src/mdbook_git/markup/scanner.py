from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

TOKEN_RE = re.compile(
    r"""
    \{\{\s*     # opening braces and optional whitespace
    \#git       # keyword
    \s+         # separating whitespace
    ([^}]+)     # command body, up to the first closing brace
    \}\}        # closing braces
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class TokenMatch:
    start: int
    end: int
    text: str
    body: str


def find_tokens(content: str) -> Iterator[TokenMatch]:
    """Yield `{{ #git ... }}` tokens left to right; matches never overlap."""
    for m in TOKEN_RE.finditer(content):
        yield TokenMatch(start=m.start(), end=m.end(), text=m.group(0), body=m.group(1))
