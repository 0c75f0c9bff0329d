"""Custom exception classes."""
from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class ConfigurationError(AppError):
    """Raised for unusable configuration input."""

    def __init__(self, detail: str = "Configuration error") -> None:
        super().__init__(detail=detail)
