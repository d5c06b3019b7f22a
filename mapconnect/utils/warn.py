"""
Non-fatal diagnostics carried alongside a value.

How to surface problems:

- If it doesn't make sense to hand a Timer to a routine, return Warn.
- If there's no Timer, pass the Warn up to the caller.
- If a Timer is available and there's a Warn, use get() or with_context().
- If a Timer is available and something goes wrong, call timer.warn() directly.
- Don't pass a Warn through several layers while accumulating context on the
  way. It gets tedious fast.

Usage:
    result = Warn.warn(polygons, "Skipping way 123: fewer than 3 points")
    polygons = result.with_context(timer, "load buildings")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, List, Optional, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    from .timer import Timer

T = TypeVar("T")
O = TypeVar("O")

console = Console()


class Warn(Generic[T]):
    """A value plus an ordered list of warnings about how it was produced."""

    __slots__ = ("value", "warnings")

    def __init__(self, value: T, warnings: Optional[List[str]] = None):
        self.value = value
        self.warnings: List[str] = list(warnings) if warnings else []

    @classmethod
    def ok(cls, value: T) -> "Warn[T]":
        return cls(value)

    @classmethod
    def warn(cls, value: T, warning: str) -> "Warn[T]":
        return cls(value, [warning])

    @classmethod
    def with_warnings(cls, value: T, warnings: List[str]) -> "Warn[T]":
        return cls(value, warnings)

    @classmethod
    def empty_warnings(cls, warnings: List[str]) -> "Warn[None]":
        return cls(None, warnings)

    def unwrap(self) -> T:
        """Print any warnings to stdout and return the value."""
        if self.warnings:
            _print_block(f"{len(self.warnings)} warnings:", self.warnings)
            self.warnings = []
        return self.value

    def expect(self, context: str) -> T:
        """Like unwrap(), with the warning block labelled by context."""
        if self.warnings:
            _print_block(f"{len(self.warnings)} warnings ({context}):", self.warnings)
            self.warnings = []
        return self.value

    def get(self, timer: "Timer") -> T:
        """Hand every warning to the timer's current phase and return the value."""
        for line in self.warnings:
            timer.warn(line)
        self.warnings = []
        return self.value

    def with_context(self, timer: "Timer", context: str) -> T:
        for line in self.warnings:
            timer.warn(f"{context}: {line}")
        self.warnings = []
        return self.value

    def map(self, f: Callable[[T], O]) -> "Warn[O]":
        return Warn(f(self.value), self.warnings)

    def __repr__(self) -> str:
        return f"Warn({self.value!r}, warnings={self.warnings!r})"


def _print_block(header: str, lines: List[str]) -> None:
    console.print(header, markup=False, highlight=False, soft_wrap=True)
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
