from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_INTERNAL


@dataclass
class MdbookGitError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class ResolutionError(Exception):
    """A token could not be resolved against the repository.

    Never fatal: the rewrite pass keeps the original token text when this is raised.
    """

    message: str
    revision: str = ""
    path: str = ""

    def __str__(self) -> str:
        return self.message
