from __future__ import annotations

from dataclasses import dataclass

import pytest

from structcompare import LengthMismatchError, assert_no_diffs


@dataclass(frozen=True)
class Track:
    title: str
    seconds: int


def test_assert_no_diffs_passes_for_equal_values() -> None:
    assert_no_diffs([Track("a", 1)], [Track("a", 1)])


def test_assert_no_diffs_lists_every_diff() -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_no_diffs([Track("a", 1)], [Track("b", 2)])

    message = str(exc_info.value)
    assert message.startswith("2 difference(s) between expected and actual")
    assert '[0].title: expected "a", got "b"' in message
    assert "[0].seconds: expected 1, got 2" in message


def test_assert_no_diffs_uses_custom_message() -> None:
    with pytest.raises(AssertionError, match="^tracks differ"):
        assert_no_diffs([1], [2], message="tracks differ")


def test_structural_errors_are_not_assertion_failures() -> None:
    with pytest.raises(LengthMismatchError):
        assert_no_diffs([1, 2], [1])
