from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from pathlib import PurePosixPath

from structcompare.canonical import canonical_dumps, normalize_for_json


@dataclass
class Node:
    name: str
    next: Node | None = None
    _secret: str = "hidden"


class Level(Enum):
    LOW = 1


def test_canonical_serialization_is_stable() -> None:
    left = {"b": 2, "a": [3, {"z": 0, "y": 1}]}
    right = {"a": [3, {"y": 1, "z": 0}], "b": 2}
    assert canonical_dumps(left) == canonical_dumps(right)


def test_normalize_handles_special_floats_and_bytes() -> None:
    assert normalize_for_json(float("nan")) == "NaN"
    assert normalize_for_json(float("-inf")) == "-Infinity"
    assert normalize_for_json(b"abc") == "abc"
    assert normalize_for_json(Level.LOW) == 1
    assert normalize_for_json({3, 1, 2}) == [1, 2, 3]


def test_normalize_renders_public_dataclass_fields_and_cycles() -> None:
    node = Node("a")
    node.next = node

    assert normalize_for_json(node) == {"name": "a", "next": "<cycle>"}


def test_normalize_falls_back_to_string_for_self_comparing_types() -> None:
    assert normalize_for_json(Fraction(1, 3)) == "1/3"
    assert normalize_for_json(PurePosixPath("a/b")) == "a/b"


def test_normalize_renders_public_members_of_plain_objects() -> None:
    class Account:
        def __init__(self, owner: str) -> None:
            self.owner = owner
            self.tags = ("vip",)
            self._token = "hidden"

    class Slotted:
        __slots__ = ("left", "right")

        def __init__(self, left: int) -> None:
            self.left = left

    assert normalize_for_json(Account("ada")) == {"owner": "ada", "tags": ["vip"]}
    assert normalize_for_json(Slotted(3)) == {"left": 3}
