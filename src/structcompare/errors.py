from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

ERROR_CODE_TYPE_MISMATCH = "TYPE_MISMATCH"
ERROR_CODE_LENGTH_MISMATCH = "LENGTH_MISMATCH"
ERROR_CODE_MISSING_FIELD = "MISSING_FIELD"
ERROR_CODE_INVALID_TYPE = "INVALID_TYPE"


def _type_name(tp: type) -> str:
    if tp.__module__ == "builtins":
        return tp.__qualname__
    return f"{tp.__module__}.{tp.__qualname__}"


class StructuralError(ValueError):
    """Fatal shape mismatch that aborts a whole comparison."""

    code: ClassVar[str] = "STRUCTURAL_ERROR"
    path: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self), "path": self.path}


@dataclass(slots=True)
class TypeMismatchError(StructuralError):
    path: str
    expected_type: type
    actual_type: type

    code: ClassVar[str] = ERROR_CODE_TYPE_MISMATCH

    def to_dict(self) -> dict[str, Any]:
        payload = StructuralError.to_dict(self)
        payload["expected_type"] = _type_name(self.expected_type)
        payload["actual_type"] = _type_name(self.actual_type)
        return payload

    def __str__(self) -> str:
        return (
            f"{self.code}: mismatched type of `{self.path}`, "
            f"expected={_type_name(self.expected_type)} actual={_type_name(self.actual_type)}"
        )


@dataclass(slots=True)
class LengthMismatchError(StructuralError):
    path: str
    expected_len: int
    actual_len: int

    code: ClassVar[str] = ERROR_CODE_LENGTH_MISMATCH

    def to_dict(self) -> dict[str, Any]:
        payload = StructuralError.to_dict(self)
        payload["expected_len"] = self.expected_len
        payload["actual_len"] = self.actual_len
        return payload

    def __str__(self) -> str:
        return (
            f"{self.code}: mismatched len of `{self.path}`, "
            f"expected={self.expected_len} actual={self.actual_len}"
        )


@dataclass(slots=True)
class MissingFieldError(StructuralError):
    path: str

    code: ClassVar[str] = ERROR_CODE_MISSING_FIELD

    def __str__(self) -> str:
        return f"{self.code}: field `{self.path}` not found in actual"


@dataclass(slots=True)
class InvalidTypeError(StructuralError):
    path: str
    value_type: type

    code: ClassVar[str] = ERROR_CODE_INVALID_TYPE

    def to_dict(self) -> dict[str, Any]:
        payload = StructuralError.to_dict(self)
        payload["value_type"] = _type_name(self.value_type)
        return payload

    def __str__(self) -> str:
        return f"{self.code}: cannot compare `{self.path}` of type {_type_name(self.value_type)}"


class ConfigError(ValueError):
    pass


class DocumentLoadError(ValueError):
    pass


__all__ = [
    "ERROR_CODE_INVALID_TYPE",
    "ERROR_CODE_LENGTH_MISMATCH",
    "ERROR_CODE_MISSING_FIELD",
    "ERROR_CODE_TYPE_MISMATCH",
    "ConfigError",
    "DocumentLoadError",
    "InvalidTypeError",
    "LengthMismatchError",
    "MissingFieldError",
    "StructuralError",
    "TypeMismatchError",
]
