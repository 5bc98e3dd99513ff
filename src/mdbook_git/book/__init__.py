"""mdBook integration: the preprocessor protocol and `[preprocessor.git]` configuration."""

from __future__ import annotations

from .config import GitConfig, open_repository
from .preprocessor import GitPreprocessor
from .protocol import PreprocessorContext, for_each_chapter, parse_input, write_book
from .version import SUPPORTED_MDBOOK_VERSION, version_matches

__all__ = [
    "GitConfig",
    "GitPreprocessor",
    "PreprocessorContext",
    "SUPPORTED_MDBOOK_VERSION",
    "for_each_chapter",
    "open_repository",
    "parse_input",
    "version_matches",
    "write_book",
]
