from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from structcompare.canonical import canonical_dumps
from structcompare.compare import CompareResult, Diff
from structcompare.constants import DEFAULT_REPORT_TITLE, REPORT_FORMATS


def _display_path(diff: Diff) -> str:
    return diff.field or "<root>"


def _display_value(value: Any) -> str:
    return canonical_dumps(value)


def _visible(result: CompareResult, max_diffs: int | None) -> tuple[list[Diff], int]:
    if max_diffs is None or len(result.diffs) <= max_diffs:
        return list(result.diffs), 0
    return list(result.diffs[:max_diffs]), len(result.diffs) - max_diffs


def format_diff_lines(diffs: list[Diff]) -> list[str]:
    return [
        f"{_display_path(diff)}: expected {_display_value(diff.expected)}, got {_display_value(diff.actual)}"
        for diff in diffs
    ]


def render_text(result: CompareResult, *, max_diffs: int | None = None) -> str:
    if result.error is not None:
        return f"ERROR: {result.error}\n"
    if not result.diffs:
        return "No differences.\n"
    shown, hidden = _visible(result, max_diffs)
    lines = [f"{len(result.diffs)} difference(s):"]
    lines.extend(f"  {line}" for line in format_diff_lines(shown))
    if hidden:
        lines.append(f"  ... {hidden} more not shown")
    lines.append("")
    return "\n".join(lines)


def render_markdown(
    result: CompareResult,
    *,
    title: str = DEFAULT_REPORT_TITLE,
    max_diffs: int | None = None,
) -> str:
    lines: list[str] = []
    lines.append(f"## {title}")
    lines.append("")
    if result.error is not None:
        status = "Structural error"
    elif result.diffs:
        status = "Differences found"
    else:
        status = "Equal"
    lines.append(f"- Status: **{status}**")
    lines.append(f"- Differences: **{len(result.diffs)}**")

    if result.error is not None:
        location = result.error.path or "<root>"
        lines.append("")
        lines.append("### Error")
        lines.append("")
        lines.append(f"- `{result.error.code}` at `{location}`: {result.error}")
        lines.append("")
        return "\n".join(lines)

    lines.append("")
    lines.append("### Differences")
    lines.append("")
    if not result.diffs:
        lines.append("No differences.")
    else:
        shown, hidden = _visible(result, max_diffs)
        lines.append("| Field | Expected | Actual |")
        lines.append("|---|---|---|")
        for diff in shown:
            lines.append(
                f"| `{_display_path(diff)}` | `{_display_value(diff.expected)}` | `{_display_value(diff.actual)}` |"
            )
        if hidden:
            lines.append("")
            lines.append(f"_{hidden} more difference(s) not shown._")

    lines.append("")
    return "\n".join(lines)


def render_json(result: CompareResult, *, max_diffs: int | None = None) -> str:
    payload = result.to_dict()
    shown, hidden = _visible(result, max_diffs)
    if hidden:
        payload["diffs"] = [diff.to_dict() for diff in shown]
        payload["omitted_diff_count"] = hidden
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def render(
    result: CompareResult,
    fmt: str,
    *,
    title: str = DEFAULT_REPORT_TITLE,
    max_diffs: int | None = None,
) -> str:
    if fmt == "text":
        return render_text(result, max_diffs=max_diffs)
    if fmt == "markdown":
        return render_markdown(result, title=title, max_diffs=max_diffs)
    if fmt == "json":
        return render_json(result, max_diffs=max_diffs)
    supported = "|".join(sorted(REPORT_FORMATS))
    raise ValueError(f"format must be one of {supported}; got: {fmt}")


def write_report(
    result: CompareResult,
    path: Path,
    fmt: str,
    *,
    title: str = DEFAULT_REPORT_TITLE,
    max_diffs: int | None = None,
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(result, fmt, title=title, max_diffs=max_diffs), encoding="utf-8")
