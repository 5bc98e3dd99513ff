"""Bundled JSON schemas and validation helpers."""

from __future__ import annotations

from .validate import PREPROCESSOR_CONFIG, load_catalog, schema_path, validate

__all__ = ["PREPROCESSOR_CONFIG", "load_catalog", "schema_path", "validate"]
