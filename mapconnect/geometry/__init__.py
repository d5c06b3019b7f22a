"""
Geometry Module - connector shapes for footprints.
"""

from .connector import (
    HashablePt,
    driveway_line,
    to_hashable,
    trim_path,
)

__all__ = [
    "HashablePt",
    "driveway_line",
    "to_hashable",
    "trim_path",
]
