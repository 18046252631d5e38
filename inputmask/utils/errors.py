"""Custom exceptions for mask compilation."""

from __future__ import annotations


class FormatError(Exception):
    """Raised when a mask format string cannot be sanitized or compiled."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.position = position
