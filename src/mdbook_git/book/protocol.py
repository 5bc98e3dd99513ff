"""The JSON protocol mdBook speaks with preprocessors over stdin/stdout."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TextIO

from ..core.serialize import dumps_json
from ..errors import MdbookGitError
from ..exit_codes import ERR_PROTOCOL

Chapter = dict[str, Any]
Book = dict[str, Any]


@dataclass(frozen=True)
class PreprocessorContext:
    root: Path
    config: dict[str, Any]
    renderer: str
    mdbook_version: str

    @classmethod
    def from_json(cls, payload: Any) -> "PreprocessorContext":
        if not isinstance(payload, dict):
            raise MdbookGitError("preprocessor context must be a JSON object", ERR_PROTOCOL, "protocol")
        config = payload.get("config") or {}
        if not isinstance(config, dict):
            raise MdbookGitError("preprocessor context `config` must be a JSON object", ERR_PROTOCOL, "protocol")
        return cls(
            root=Path(str(payload.get("root", "."))),
            config=config,
            renderer=str(payload.get("renderer", "")),
            mdbook_version=str(payload.get("mdbook_version", "")),
        )

    def preprocessor_config(self, name: str) -> dict[str, Any]:
        table = (self.config.get("preprocessor") or {}).get(name)
        return table if isinstance(table, dict) else {}


def parse_input(stream: TextIO) -> tuple[PreprocessorContext, Book]:
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise MdbookGitError(f"unable to parse preprocessor input: {exc}", ERR_PROTOCOL, "protocol") from exc
    if not isinstance(payload, list) or len(payload) != 2:
        raise MdbookGitError("preprocessor input must be a `[context, book]` array", ERR_PROTOCOL, "protocol")
    ctx = PreprocessorContext.from_json(payload[0])
    book = payload[1]
    if not isinstance(book, dict) or not isinstance(book.get("sections", []), list):
        raise MdbookGitError("preprocessor input book must be an object with `sections`", ERR_PROTOCOL, "protocol")
    return ctx, book


def write_book(book: Book, stream: TextIO) -> None:
    stream.write(dumps_json(book))
    stream.flush()


def _walk(items: list[Any], fn: Callable[[Chapter], None]) -> None:
    for item in items:
        if not isinstance(item, dict):
            continue  # "Separator"
        chapter = item.get("Chapter")
        if not isinstance(chapter, dict):
            continue  # {"PartTitle": ...}
        fn(chapter)
        _walk(chapter.get("sub_items") or [], fn)


def for_each_chapter(book: Book, fn: Callable[[Chapter], None]) -> None:
    """Call `fn` on every chapter, parents before their sub-chapters."""
    _walk(book.get("sections") or [], fn)
