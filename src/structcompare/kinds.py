from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Literal

Kind = Literal[
    "STRUCT",
    "ARRAY",
    "POINTER",
    "SLICE",
    "MAP",
    "PRIMITIVE",
    "INVALID",
]

NILABLE_KINDS = {"POINTER", "SLICE", "MAP"}

_OPAQUE_OBJECT_TYPES = (
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    Enum,
    BaseException,
)


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_frozen_dataclass(value: Any) -> bool:
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        return False
    params = getattr(type(value), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def _slot_names(tp: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(tp.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in {"__dict__", "__weakref__"} and name not in names:
                names.append(name)
    return names


def _defines_equality(tp: type) -> bool:
    return tp.__eq__ is not object.__eq__


def _is_reference_object(value: Any) -> bool:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, _OPAQUE_OBJECT_TYPES):
        return False
    tp = type(value)
    if tp.__module__ == "builtins" or _defines_equality(tp):
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(tp))


def classify(value: Any) -> Kind:
    """Map a runtime value onto the structural kind used for dispatch.

    Frozen dataclasses and named tuples are compared as value structs.
    Mutable dataclasses and plain user objects are held by reference, so they
    classify as pointers whose pointee is their own set of public members.
    Plain classes that define ``__eq__`` keep their own equality.
    """
    if is_frozen_dataclass(value) or is_named_tuple(value):
        return "STRUCT"
    if isinstance(value, tuple):
        return "ARRAY"
    if isinstance(value, list):
        return "SLICE"
    if isinstance(value, Mapping):
        return "MAP"
    if isinstance(value, Iterator):
        return "INVALID"
    if _is_reference_object(value):
        return "POINTER"
    return "PRIMITIVE"


def public_member_names(value: Any) -> list[str]:
    """Public member names of a struct-like value in declaration order.

    Slots come first, base classes before subclasses, and only slots that
    hold a value on ``value`` are listed.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [field.name for field in dataclasses.fields(value)]
    elif is_named_tuple(value):
        names = list(type(value)._fields)
    else:
        names = [name for name in _slot_names(type(value)) if hasattr(value, name)]
        if hasattr(value, "__dict__"):
            names.extend(name for name in vars(value) if name not in names)
    return [name for name in names if not name.startswith("_")]


__all__ = [
    "NILABLE_KINDS",
    "Kind",
    "classify",
    "is_frozen_dataclass",
    "is_named_tuple",
    "public_member_names",
]
