from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import MdbookGitError
from ..exit_codes import ERR_CONFIG

PREPROCESSOR_CONFIG = "mdbook-git.preprocessor-config"


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def schemas_root() -> Path:
    return Path(__file__).resolve().parent / "schema"


def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads((schemas_root() / "catalog.json").read_text(encoding="utf-8"))
    entries: dict[str, CatalogEntry] = {}
    for row in raw.get("schemas", []):
        entry = CatalogEntry(name=row["name"], version=int(row["version"]), file=row["file"])
        entries[entry.name] = entry
    return entries


def schema_path(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise MdbookGitError(f"unknown schema: {schema_name}", ERR_CONFIG, "schema")
    return schemas_root() / entry.file


def validate(schema_name: str, payload: Any) -> None:
    schema = json.loads(schema_path(schema_name).read_text(encoding="utf-8"))
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise MdbookGitError(
            f"schema validation failed for {schema_name} at {loc}: {exc.message}",
            ERR_CONFIG,
            "config",
        ) from exc
