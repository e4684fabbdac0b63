"""AnnoVault Error Handling Module

This module defines the error handling system for AnnoVault, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]


class ErrorCode(str, Enum):
    """Error codes for AnnoVault.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Cache Errors
    CACHE_READ_FAILED = "CACHE_READ_FAILED"
    CACHE_WRITE_FAILED = "CACHE_WRITE_FAILED"
    INVALID_CACHE_KEY = "INVALID_CACHE_KEY"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"

    # File System Errors
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path, Enum, Decimal to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to ensure safe serialization into log records.

    Attributes:
        file_path: Optional file path associated with the error
        operation: Optional operation name that caused the error
        additional_data: Optional dict with primitive values only
    """

    file_path: str | None = None
    operation: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self) -> dict[str, Any]:
        """Export context as a dict for logging.

        Returns:
            Dictionary with the populated fields and a guaranteed
            additional_data key.

        Example:
            >>> ErrorContext(operation="save", file_path="/tmp/x").safe_dict()
            {'file_path': '/tmp/x', 'operation': 'save', 'additional_data': {}}
        """
        data: dict[str, Any] = {}
        if self.file_path is not None:
            data["file_path"] = self.file_path
        if self.operation is not None:
            data["operation"] = self.operation
        data["additional_data"] = dict(self.additional_data or {})
        return data


class AnnoVaultError(Exception):
    """Base exception class for all AnnoVault errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize AnnoVaultError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(AnnoVaultError):
    """Domain-specific errors.

    Raised when caching rules are violated, e.g. a cache key that the
    item protocol does not allow.
    """


class InfrastructureError(AnnoVaultError):
    """Infrastructure-related errors.

    Raised when interacting with the file system or another storage
    backend fails.
    """


class ApplicationError(AnnoVaultError):
    """Application-level errors.

    Configuration problems and calls the package deliberately does not
    support.
    """


class UnsupportedOperationError(ApplicationError, NotImplementedError):
    """An operation outside the minimal cache item/pool contract was invoked.

    The item adapters only implement what the cached reader needs; every
    other method of the item protocol fails loudly instead of silently
    doing nothing.
    """


class InvalidCacheKeyError(DomainError, ValueError):
    """A cache key is empty or contains a reserved character."""


class CacheBackendError(InfrastructureError):
    """A persistent cache backend could not be initialized."""


def create_unsupported_operation_error(
    operation: str,
    component: str,
) -> UnsupportedOperationError:
    """Create an unsupported operation error with context.

    Args:
        operation: Name of the method that was invoked
        component: Class name of the component that refused it

    Returns:
        UnsupportedOperationError instance
    """
    context = ErrorContext(
        operation=operation,
        additional_data={"component": component},
    )
    return UnsupportedOperationError(
        ErrorCode.UNSUPPORTED_OPERATION,
        f"{component}.{operation}() is not implemented",
        context,
    )


def create_invalid_key_error(key: str, reason: str) -> InvalidCacheKeyError:
    """Create an invalid cache key error with context."""
    context = ErrorContext(
        operation="validate_key",
        additional_data={"key": key[:50], "reason": reason},
    )
    return InvalidCacheKeyError(
        ErrorCode.INVALID_CACHE_KEY,
        f"Invalid cache key {key!r}: {reason}",
        context,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        message,
        context,
        original_error,
    )
