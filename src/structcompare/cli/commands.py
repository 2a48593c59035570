from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import typer

from structcompare.compare import compare_result
from structcompare.config import CompareConfig, load_config, parse_config
from structcompare.constants import EXIT_DIFFS_FOUND, EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from structcompare.documents import load_document
from structcompare.errors import ConfigError, DocumentLoadError
from structcompare.report import render, write_report

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from structcompare import __version__

        typer.echo(f"structcompare {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Structural comparison of nested data")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
) -> None:
    pass


def _resolve_config(
    *,
    config_path: Path | None,
    fmt: str | None,
    max_diffs: int | None,
    log_level: str | None,
) -> CompareConfig:
    config = load_config(config_path)
    overrides: dict[str, object] = {}
    if fmt is not None:
        overrides["format"] = fmt
    if max_diffs is not None:
        overrides["max_rendered_diffs"] = max_diffs
    if log_level is not None:
        overrides["log_level"] = log_level
    if not overrides:
        return config
    parsed = parse_config(overrides)
    return replace(config, **{key: getattr(parsed, key) for key in overrides})


@app.command()
def diff(
    expected: Path = typer.Argument(..., help="Expected document (.json, .yaml, .yml)"),
    actual: Path = typer.Argument(..., help="Actual document (.json, .yaml, .yml)"),
    fmt: str | None = typer.Option(None, "--format", help="Report format: text | markdown | json"),
    config_path: Path | None = typer.Option(None, "--config", help="Path to a structcompare.yaml config"),
    output: Path | None = typer.Option(None, "--output", help="Also write the report to this file"),
    max_diffs: int | None = typer.Option(None, "--max-diffs", help="Limit the number of rendered diffs"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG"),
) -> None:
    """Compare two documents and report every differing leaf."""
    try:
        config = _resolve_config(config_path=config_path, fmt=fmt, max_diffs=max_diffs, log_level=log_level)
    except ConfigError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        expected_doc = load_document(expected)
        actual_doc = load_document(actual)
    except DocumentLoadError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    logger.info("comparing %s against %s", expected, actual)
    result = compare_result(expected_doc, actual_doc)
    report = render(result, config.format, title=config.title, max_diffs=config.max_rendered_diffs)
    typer.echo(report, nl=False)
    if output is not None:
        write_report(result, output, config.format, title=config.title, max_diffs=config.max_rendered_diffs)

    if result.error is not None:
        raise typer.Exit(EXIT_INTERNAL_ERROR)
    if result.diffs:
        raise typer.Exit(EXIT_DIFFS_FOUND)
    raise typer.Exit(EXIT_SUCCESS)


__all__ = ["app"]
