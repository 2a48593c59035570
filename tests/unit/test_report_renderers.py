from __future__ import annotations

import json
from pathlib import Path

import pytest

from structcompare import compare_result
from structcompare.report import render, render_json, render_markdown, render_text, write_report


def test_render_text_lists_diffs() -> None:
    result = compare_result({"a": 1, "b": "x"}, {"a": 2, "b": "y"})

    text = render_text(result)

    assert text.splitlines() == [
        "2 difference(s):",
        "  [a]: expected 1, got 2",
        '  [b]: expected "x", got "y"',
    ]


def test_render_text_truncates_rendering_only() -> None:
    result = compare_result([1, 2, 3], [4, 5, 6])

    text = render_text(result, max_diffs=1)

    assert "  [0]: expected 1, got 4" in text
    assert "  ... 2 more not shown" in text
    assert len(result.diffs) == 3


def test_render_text_for_equal_and_error_results() -> None:
    assert render_text(compare_result(1, 1)) == "No differences.\n"
    assert render_text(compare_result([1], [1, 2])).startswith("ERROR: LENGTH_MISMATCH")


def test_render_markdown_reports_root_path() -> None:
    markdown = render_markdown(compare_result(1, 2), title="Check")

    assert "## Check" in markdown
    assert "- Status: **Differences found**" in markdown
    assert "| `<root>` | `1` | `2` |" in markdown


def test_render_markdown_reports_structural_error() -> None:
    markdown = render_markdown(compare_result({"a": [1]}, {"a": [1, 2]}))

    assert "- Status: **Structural error**" in markdown
    assert "`LENGTH_MISMATCH` at `[a]`" in markdown


def test_render_json_matches_result_payload() -> None:
    result = compare_result({"a": 1}, {"a": 2})
    assert json.loads(render_json(result)) == result.to_dict()


def test_render_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="format must be one of"):
        render(compare_result(1, 1), "html")


def test_write_report_creates_parent_dirs(tmp_path: Path) -> None:
    target = tmp_path / "reports" / "diff.md"

    write_report(compare_result(1, 1), target, "markdown")

    assert "- Status: **Equal**" in target.read_text(encoding="utf-8")


def test_render_json_honors_render_limit() -> None:
    result = compare_result([1, 2, 3], [4, 5, 6])

    payload = json.loads(render_json(result, max_diffs=2))

    assert payload["diff_count"] == 3
    assert [diff["field"] for diff in payload["diffs"]] == ["[0]", "[1]"]
    assert payload["omitted_diff_count"] == 1
    assert "omitted_diff_count" not in json.loads(render_json(result))
    assert json.loads(render(result, "json", max_diffs=2)) == payload
