"""Canonical JSON serialization helpers."""

from __future__ import annotations

import json
from typing import Any


def dumps_json(payload: Any) -> str:
    return json.dumps(payload, sort_keys=True)
