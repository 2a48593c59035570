from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from structcompare.kinds import classify, public_member_names


def _normalize_float(value: float) -> float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return round(value, 12)


def normalize_for_json(value: Any, *, _seen: frozenset[int] = frozenset()) -> Any:
    """Convert an arbitrary compared value into a JSON-safe structure.

    Values already on the current branch are rendered as ``"<cycle>"`` so
    self-referential objects can be reported.
    """
    if value is None or (isinstance(value, (str, bool, int)) and not isinstance(value, Enum)):
        return value
    if isinstance(value, float):
        return _normalize_float(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Enum):
        return normalize_for_json(value.value, _seen=_seen)
    if id(value) in _seen:
        return "<cycle>"
    seen = _seen | {id(value)}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: normalize_for_json(getattr(value, field.name, None), _seen=seen)
            for field in dataclasses.fields(value)
            if not field.name.startswith("_")
        }
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return {name: normalize_for_json(getattr(value, name), _seen=seen) for name in value._fields}
    if isinstance(value, Mapping):
        return {str(key): normalize_for_json(value[key], _seen=seen) for key in sorted(value.keys(), key=str)}
    if isinstance(value, (set, frozenset)):
        return [normalize_for_json(item, _seen=seen) for item in sorted(value, key=str)]
    if isinstance(value, Sequence):
        return [normalize_for_json(item, _seen=seen) for item in value]
    if classify(value) == "POINTER":
        return {name: normalize_for_json(getattr(value, name), _seen=seen) for name in public_member_names(value)}
    return str(value)


def canonical_dumps(value: Any) -> str:
    normalized = normalize_for_json(value)
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


__all__ = ["canonical_dumps", "normalize_for_json"]
