"""Logging setup shared by the API and the CLI.

Modules log through ``logging.getLogger(__name__)``; this module only decides
how records are rendered.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from erp_core.config import settings

_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for extra in ("cache", "key", "prefix", "removed", "company_id"):
            if hasattr(record, extra):
                log_entry[extra] = getattr(record, extra)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Install a root handler using the configured level and format.

    Args:
        level (str | None, optional): Log level name. Defaults to ``settings.log_level``.
        fmt (str | None, optional): ``"text"`` or ``"json"``. Defaults to ``settings.log_format``.
    """
    handler = logging.StreamHandler()
    if (fmt or settings.log_format).lower() == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel((level or settings.log_level).upper())
