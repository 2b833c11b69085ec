"""
Exception classes for the i18n JavaScript export.

File-system failures are not wrapped: the writer lets ``OSError`` propagate
so callers can tell I/O problems apart from bundle and configuration errors.
"""

from __future__ import annotations

from enum import Enum


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    CONFIGURATION = "configuration"
    RESOURCE = "resource"
    UNKNOWN = "unknown"


class ExportError(Exception):
    """Base exception class for export specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.severity: ErrorSeverity = severity
        self.context: object | None = context
        self.recoverable: bool = recoverable


class ConfigurationError(ExportError):
    """Missing or unusable export configuration, such as an empty locale list."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
            recoverable=False,
        )


class ResourceNotFoundError(ExportError):
    """No resource bundle exists for the requested locale."""

    def __init__(
        self,
        message: str,
        locale: str | None = None,
        searched: list[str] | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.RESOURCE,
            severity=ErrorSeverity.MEDIUM,
            context=locale,
            recoverable=True,
        )
        self.locale: str | None = locale
        self.searched: list[str] = searched or []
