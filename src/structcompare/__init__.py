"""Structural comparison of nested Python values with path-qualified diffs."""
from __future__ import annotations

from structcompare.assertions import assert_no_diffs
from structcompare.compare import CompareResult, Diff, compare, compare_result
from structcompare.errors import (
    InvalidTypeError,
    LengthMismatchError,
    MissingFieldError,
    StructuralError,
    TypeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    "CompareResult",
    "Diff",
    "InvalidTypeError",
    "LengthMismatchError",
    "MissingFieldError",
    "StructuralError",
    "TypeMismatchError",
    "__version__",
    "assert_no_diffs",
    "compare",
    "compare_result",
]
