from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal, cast

import yaml

from structcompare.constants import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPORT_FORMAT,
    DEFAULT_REPORT_TITLE,
    ENV_FORMAT,
    ENV_LOG_LEVEL,
    REPORT_FORMATS,
)
from structcompare.errors import ConfigError

ReportFormat = Literal["text", "markdown", "json"]

_KNOWN_KEYS = {"format", "max_rendered_diffs", "log_level", "title"}


@dataclass(slots=True)
class CompareConfig:
    format: ReportFormat = cast(ReportFormat, DEFAULT_REPORT_FORMAT)
    max_rendered_diffs: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    title: str = DEFAULT_REPORT_TITLE


def _parse_format(raw: Any) -> ReportFormat:
    fmt = str(raw).strip().lower()
    if fmt not in REPORT_FORMATS:
        supported = "|".join(sorted(REPORT_FORMATS))
        raise ConfigError(f"format must be one of {supported}; got: {fmt}")
    return cast(ReportFormat, fmt)


def _parse_max_rendered_diffs(raw: Any) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int | str):
        raise ConfigError("max_rendered_diffs must be a positive integer")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError("max_rendered_diffs must be a positive integer") from exc
    if value <= 0:
        raise ConfigError("max_rendered_diffs must be a positive integer")
    return value


def _parse_log_level(raw: Any) -> str:
    level = str(raw).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"log_level is not a valid logging level: {level}")
    return level


def parse_config(raw: Mapping[str, Any]) -> CompareConfig:
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    config = CompareConfig()
    if "format" in raw:
        config.format = _parse_format(raw["format"])
    if "max_rendered_diffs" in raw:
        config.max_rendered_diffs = _parse_max_rendered_diffs(raw["max_rendered_diffs"])
    if "log_level" in raw:
        config.log_level = _parse_log_level(raw["log_level"])
    if "title" in raw:
        config.title = str(raw["title"])
    return config


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file must be a mapping: {path}")
    return loaded


def apply_env_overrides(config: CompareConfig, env: Mapping[str, str] | None = None) -> CompareConfig:
    source = os.environ if env is None else env
    updated = config
    raw_format = source.get(ENV_FORMAT)
    if raw_format:
        updated = replace(updated, format=_parse_format(raw_format))
    raw_level = source.get(ENV_LOG_LEVEL)
    if raw_level:
        updated = replace(updated, log_level=_parse_log_level(raw_level))
    return updated


def load_config(
    path: Path | None = None,
    *,
    project_root: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> CompareConfig:
    """Load config from ``path`` or the default file, then apply env overrides.

    An explicit ``path`` must exist; the default file is optional.
    """
    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        config = parse_config(_load_yaml(path))
    else:
        default_path = (project_root or Path(".")) / DEFAULT_CONFIG_FILE
        config = parse_config(_load_yaml(default_path)) if default_path.exists() else CompareConfig()
    return apply_env_overrides(config, env)


__all__ = [
    "CompareConfig",
    "ReportFormat",
    "apply_env_overrides",
    "load_config",
    "parse_config",
]
