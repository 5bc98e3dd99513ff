"""mdBook version compatibility (caret requirements, as Cargo resolves them)."""

from __future__ import annotations

import re

SUPPORTED_MDBOOK_VERSION = "0.4.40"

_VERSION_RE = re.compile(r"^\s*v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def parse_version(raw: str) -> tuple[int, int, int] | None:
    m = _VERSION_RE.match(raw)
    if not m:
        return None
    major, minor, patch = (int(part) if part is not None else 0 for part in m.groups())
    return major, minor, patch


def version_matches(requirement: str, version: str) -> bool:
    req = parse_version(requirement)
    got = parse_version(version)
    if req is None or got is None:
        return False
    if got < req:
        return False
    if req[0] > 0:
        return got[0] == req[0]
    if req[1] > 0:
        return got[:2] == req[:2]
    return got == req
