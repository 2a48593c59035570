from __future__ import annotations

from pathlib import Path

ROOT_PATH = ""
DEFAULT_CONFIG_FILE = Path("structcompare.yaml")

REPORT_FORMATS = {"text", "markdown", "json"}
DEFAULT_REPORT_FORMAT = "text"
DEFAULT_REPORT_TITLE = "structcompare report"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_FORMAT = "STRUCTCOMPARE_FORMAT"
ENV_LOG_LEVEL = "STRUCTCOMPARE_LOG_LEVEL"

EXIT_SUCCESS = 0
EXIT_DIFFS_FOUND = 1
EXIT_INTERNAL_ERROR = 2
