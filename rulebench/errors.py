"""Exceptions raised by the extraction pipeline."""

from __future__ import annotations

from typing import Iterable


class RulebenchError(Exception):
    """Base class for all extraction errors."""


class ConfigurationError(RulebenchError):
    """Raised when a run cannot start; no output is produced."""


class UnknownProfile(ConfigurationError):
    """Raised when a profile name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        message = f"Unknown profile: {name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class MalformedDocument(RulebenchError):
    """Raised when a single rule document cannot be parsed."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"{filename}: {reason}")
