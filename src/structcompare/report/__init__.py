from structcompare.report.renderers import (
    format_diff_lines,
    render,
    render_json,
    render_markdown,
    render_text,
    write_report,
)

__all__ = [
    "format_diff_lines",
    "render",
    "render_json",
    "render_markdown",
    "render_text",
    "write_report",
]
