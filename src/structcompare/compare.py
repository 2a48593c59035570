from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from structcompare.canonical import normalize_for_json
from structcompare.constants import ROOT_PATH
from structcompare.errors import (
    InvalidTypeError,
    LengthMismatchError,
    MissingFieldError,
    StructuralError,
    TypeMismatchError,
)
from structcompare.kinds import NILABLE_KINDS, classify, public_member_names

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(slots=True, frozen=True)
class Diff:
    """One leaf-level mismatch. An empty ``field`` means the root value."""

    field: str
    expected: Any
    actual: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "expected": normalize_for_json(self.expected),
            "actual": normalize_for_json(self.actual),
        }


@dataclass(slots=True)
class CompareResult:
    diffs: list[Diff] = field(default_factory=list)
    error: StructuralError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.diffs

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "diff_count": len(self.diffs),
            "diffs": [diff.to_dict() for diff in self.diffs],
            "error": self.error.to_dict() if self.error is not None else None,
        }


class _VisitedRefs:
    """Identity registry of entered references, one per compared side."""

    __slots__ = ("_ids",)

    def __init__(self) -> None:
        self._ids: set[int] = set()

    def __contains__(self, identity: int) -> bool:
        return identity in self._ids

    def mark(self, identity: int) -> None:
        self._ids.add(identity)


class _Walker:
    __slots__ = ("_expected_visited", "_actual_visited")

    def __init__(self) -> None:
        self._expected_visited = _VisitedRefs()
        self._actual_visited = _VisitedRefs()

    def dispatch(self, path: str, expected: Any, actual: Any) -> list[Diff]:
        # None carries its own runtime type, so absence is resolved first.
        if expected is None and actual is None:
            return []
        if expected is None or actual is None:
            return [Diff(field=path, expected=expected, actual=actual)]

        if type(expected) is not type(actual):
            raise TypeMismatchError(path=path, expected_type=type(expected), actual_type=type(actual))

        kind = classify(expected)
        if kind == "STRUCT":
            return self.walk_struct(path, expected, actual)
        if kind == "ARRAY":
            return self.walk_sequence(path, expected, actual)
        if kind in NILABLE_KINDS:
            if kind == "POINTER":
                return self.follow_pointer(path, expected, actual)
            if kind == "SLICE":
                return self.walk_sequence(path, expected, actual)
            return self.walk_map(path, expected, actual)
        if kind == "PRIMITIVE":
            if expected != actual:
                return [Diff(field=path, expected=expected, actual=actual)]
            return []
        raise InvalidTypeError(path=path, value_type=type(expected))

    def walk_struct(self, path: str, expected: Any, actual: Any) -> list[Diff]:
        diffs: list[Diff] = []
        for name in public_member_names(expected):
            member_path = f"{path}.{name}"
            expected_member = getattr(expected, name, _MISSING)
            actual_member = getattr(actual, name, _MISSING)
            if actual_member is _MISSING:
                raise MissingFieldError(path=member_path)
            if expected_member is _MISSING:
                # Declared but never assigned on the expected side.
                expected_member = None
            diffs.extend(self.dispatch(member_path, expected_member, actual_member))
        return diffs

    def walk_sequence(self, path: str, expected: Sequence[Any], actual: Sequence[Any]) -> list[Diff]:
        if len(expected) != len(actual):
            raise LengthMismatchError(path=path, expected_len=len(expected), actual_len=len(actual))
        diffs: list[Diff] = []
        for index, (expected_item, actual_item) in enumerate(zip(expected, actual)):
            diffs.extend(self.dispatch(f"{path}[{index}]", expected_item, actual_item))
        return diffs

    def walk_map(self, path: str, expected: Mapping[Any, Any], actual: Mapping[Any, Any]) -> list[Diff]:
        if len(expected) != len(actual):
            raise LengthMismatchError(path=path, expected_len=len(expected), actual_len=len(actual))
        diffs: list[Diff] = []
        for key in sorted(expected.keys(), key=str):
            diffs.extend(self.dispatch(f"{path}[{key}]", expected[key], actual.get(key)))
        return diffs

    def follow_pointer(self, path: str, expected: Any, actual: Any) -> list[Diff]:
        # Both registries are keyed by the expected-side identity; the actual
        # identity is recorded but never looked up.
        identity = id(expected)
        if identity in self._expected_visited or identity in self._actual_visited:
            return []
        self._expected_visited.mark(identity)
        self._actual_visited.mark(id(actual))
        return self.walk_struct(f"*({path})", expected, actual)


def compare(expected: Any, actual: Any) -> list[Diff]:
    """Return every leaf difference between ``expected`` and ``actual``.

    Diffs are ordered by traversal: struct members in declaration order,
    sequence items by ascending index and mapping entries by the string form
    of the expected keys. Any shape mismatch raises a ``StructuralError``
    subclass and no diffs are returned.
    """
    logger.debug("comparing %s against %s", type(expected).__name__, type(actual).__name__)
    try:
        diffs = _Walker().dispatch(ROOT_PATH, expected, actual)
    except StructuralError as exc:
        logger.debug("comparison aborted: %s", exc)
        raise
    logger.debug("comparison finished with %d diff(s)", len(diffs))
    return diffs


def compare_result(expected: Any, actual: Any) -> CompareResult:
    try:
        diffs = compare(expected, actual)
    except StructuralError as exc:
        return CompareResult(diffs=[], error=exc)
    return CompareResult(diffs=diffs)


__all__ = ["CompareResult", "Diff", "compare", "compare_result"]
