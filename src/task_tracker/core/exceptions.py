from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid.

    ``errors`` maps a payload field name to its message.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = dict(errors or {})


class ConstraintViolationError(DomainError):
    """Raised when a write breaks a store constraint (unique email, dangling employee reference)."""


class StorageError(DomainError):
    """Raised when the backing store is unavailable or fails unexpectedly."""
