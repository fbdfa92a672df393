"""Exception hierarchy.

Every failure in cxxtool is fatal for the run. Each class also derives
from the closest builtin so callers can catch either.
"""

from __future__ import annotations

from typing import Any, Mapping


class CxxToolError(Exception):
    """Base exception for cxxtool."""

    context: dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = dict(context) if context is not None else {}


class ConfigError(CxxToolError, ValueError):
    """Raised for a missing or invalid configuration value."""


class RegistryError(CxxToolError, LookupError):
    """Raised for duplicate, unknown or late tool/template registration."""


class InjectRangeError(CxxToolError, IndexError):
    """Raised when an injection range falls outside the text."""


class SubstitutionError(CxxToolError, KeyError):
    """Raised when a template references an undefined variable."""

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return self.args[0] if self.args else ""


class MarkerError(CxxToolError, ValueError):
    """Raised for a refresh marker without its matching close marker."""


class UnknownReferenceError(CxxToolError, LookupError):
    """Raised when a marker names neither a template nor a generator."""


class GeneratorError(CxxToolError, ValueError):
    """Raised for a malformed or failing embedded generator function."""


class IncludeSortError(CxxToolError, RuntimeError):
    """Raised when sorting an include block would change its length."""
