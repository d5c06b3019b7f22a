"""Utility modules."""

from .logging_config import (
    get_logger,
    setup_logging,
    ensure_logging,
    MapConnectFormatter,
    FileFormatter,
)
from .timer import Timer
from .validation import (
    validate_polygon,
    validate_ring,
    ValidationError,
)
from .warn import Warn

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    "ensure_logging",
    "MapConnectFormatter",
    "FileFormatter",
    # Diagnostics
    "Timer",
    "Warn",
    # Validation
    "validate_polygon",
    "validate_ring",
    "ValidationError",
]
