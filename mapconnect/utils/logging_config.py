"""
mapconnect Logging Configuration.

Console and file logging for the synthesis pipeline. Per-item diagnostics
raised through ``Timer.warn`` carry the pipeline phase plus the id of the
footprint they concern, and both formatters render those as context:

    2026-01-01 12:00:00 | WARNING  | mapconnect.utils.timer | Building #3 (OSM way 41) can't have a driveway. Forfeiting 5 parking spots [phase=convert buildings, building_id=3, osm_way_id=41]

Usage:
    from mapconnect.utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.warning("No driveway", extra={"lot_id": 12})
"""

import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional


DEFAULT_LOG_LEVEL = os.environ.get("MAPCONNECT_LOG_LEVEL", "INFO").upper()

LOG_DIR = Path(os.environ.get("MAPCONNECT_LOG_DIR", "logs"))

# Record attributes the pipeline attaches, in display order
CONTEXT_KEYS = ("phase", "building_id", "osm_way_id", "lot_id")


def record_context(record: logging.LogRecord) -> Dict[str, object]:
    """Pipeline context attached to a record, in CONTEXT_KEYS order."""
    return {key: getattr(record, key) for key in CONTEXT_KEYS if hasattr(record, key)}


class MapConnectFormatter(logging.Formatter):
    """Console formatter: one line per record, context in brackets, colored by level."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True, stream=None):
        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and stream.isatty()
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        context = record_context(record)
        if context:
            formatted += " [" + ", ".join(f"{k}={v}" for k, v in context.items()) + "]"

        if self.use_colors:
            return f"{self.COLORS.get(record.levelname, '')}{formatted}{self.RESET}"
        return formatted


class FileFormatter(logging.Formatter):
    """Dict-per-line formatter for run logs, context as top-level fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(record_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return str(log_data)


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_to_file: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure the root logger for a pipeline run.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to also write a run log
        log_file: Custom log file path (default: logs/mapconnect_YYYYMMDD.log)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    root_logger.handlers.clear()

    # stdout belongs to the rich progress display and result tables
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(MapConnectFormatter(stream=sys.stderr))
    console_handler.setLevel(getattr(logging, level, logging.INFO))
    root_logger.addHandler(console_handler)

    if log_to_file:
        LOG_DIR.mkdir(exist_ok=True)
        if log_file is None:
            log_file = LOG_DIR / f"mapconnect_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(Path(log_file))
        file_handler.setFormatter(FileFormatter())
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    # Shapely's GEOS wrapper is chatty at DEBUG
    logging.getLogger("shapely").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for a mapconnect module (typically ``__name__``)."""
    return logging.getLogger(name)


_initialized = False


def ensure_logging() -> None:
    """Set up logging once per process."""
    global _initialized
    if not _initialized:
        setup_logging()
        _initialized = True
