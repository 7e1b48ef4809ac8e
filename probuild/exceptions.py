"""Custom exception hierarchy for the ProBuild estimation engine."""

from __future__ import annotations


class ProBuildError(Exception):
    """Base exception for all ProBuild errors."""


class UnknownElementTypeError(ProBuildError):
    """Raised when estimation is dispatched on a type outside ElementType."""


class ItemNotFoundError(ProBuildError):
    """Raised when a saved item id is not present in a project."""


class ConfigurationError(ProBuildError):
    """Raised when configuration values cannot be loaded."""
