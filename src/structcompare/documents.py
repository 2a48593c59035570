from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from structcompare.errors import DocumentLoadError

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_document(path: Path) -> Any:
    """Read a JSON or YAML document, chosen by file suffix."""
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise DocumentLoadError(f"Unsupported document type {suffix or '<none>'}: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read document {path}: {exc}") from exc

    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Invalid YAML in {path}: {exc}") from exc


__all__ = ["load_document"]
