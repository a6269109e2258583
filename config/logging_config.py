"""Logging setup shared by the app and the engine.

Output format: 2026-01-06T14:05:52Z [engine.reassignment_engine] INFO message

The level comes from the LOG_LEVEL environment variable unless passed in.
"""

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from config.defaults import DEFAULT_LOG_LEVEL


class ISO8601Formatter(logging.Formatter):
    """Formatter producing UTC ISO-8601 timestamps and the logger name."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return f"{timestamp} [{record.name}] {record.levelname} {message}"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once. Safe to call on every Streamlit rerun."""
    level_name = (level or os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Streamlit reruns the script on every interaction
    if not any(getattr(h, "_dorm_planner", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ISO8601Formatter())
        handler._dorm_planner = True
        root.addHandler(handler)

    return root
