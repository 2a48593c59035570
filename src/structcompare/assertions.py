from __future__ import annotations

from typing import Any

from structcompare.compare import compare
from structcompare.report.renderers import format_diff_lines


def assert_no_diffs(expected: Any, actual: Any, *, message: str | None = None) -> None:
    """Fail with a readable diff listing when ``actual`` differs from ``expected``.

    Structural errors are not assertion failures and propagate unchanged.
    """
    diffs = compare(expected, actual)
    if not diffs:
        return
    header = message or f"{len(diffs)} difference(s) between expected and actual"
    body = "\n".join(f"  {line}" for line in format_diff_lines(diffs))
    raise AssertionError(f"{header}\n{body}")
