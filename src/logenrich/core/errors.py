"""
Structured error types for logenrich.

Registration and configuration failures are startup bugs, not runtime
conditions. Every error raised by this package extends
:class:`EnrichmentError` so callers can catch one base type and still get a
category, structured context and the chained cause.

Manifesto:
    - **Typed Error Hierarchy:** Different error types for different concerns
    - **Fail Fast:** Guards run before any side effect
    - **Rich Context:** Errors carry metadata for logging
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                  EnrichmentError                      │
        │          (category, context, cause)                   │
        ├──────────────────────────────────────────────────────┤
        │  InvalidArgumentError       ConfigError               │
        │  (VALIDATION, ValueError)   (CONFIG)                  │
        │                                  │                    │
        │                             InvalidConfigError        │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidArgumentError.for_none("services")
    >>> error.argument
    'services'
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>

Guardrails:
    ❌ DON'T: Raise a bare TypeError/ValueError from a registration guard
    ✅ DO: Raise InvalidArgumentError naming the argument

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, logenrich

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured context attached to an error.

    Attributes:
        operation: Public entry point that raised (e.g. "add_application_log_enricher")
        enricher: Enricher class name involved, if any
        source: Configuration source (section path or file) involved, if any
        metadata: Additional key-value pairs
    """

    operation: str | None = None
    enricher: str | None = None
    source: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["operation", "enricher", "source"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class EnrichmentError(Exception):
    """
    Base exception for all logenrich errors.

    Subclasses set ``default_category`` to classify themselves.

    Examples:
        >>> error = EnrichmentError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.with_context(operation="enrich").context.operation
        'enrich'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> EnrichmentError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ConfigError("Bad file").with_context(source="app.toml")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# ARGUMENT ERRORS
# =============================================================================


class InvalidArgumentError(EnrichmentError, ValueError):
    """
    A required argument was absent or of an unusable type.

    Raised synchronously by registration helpers and the tag collector
    before any side effect. Also a :class:`ValueError`, so generic callers
    that guard with ``except ValueError`` keep working.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value

    @classmethod
    def for_none(cls, argument: str) -> InvalidArgumentError:
        return cls(f"Argument '{argument}' must not be None", argument=argument)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.argument:
            result["argument"] = self.argument
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


def ensure_not_none(value: Any, argument: str) -> Any:
    """Return *value* unchanged, or raise :class:`InvalidArgumentError` if it is None."""
    if value is None:
        raise InvalidArgumentError.for_none(argument)
    return value


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(EnrichmentError):
    """
    Configuration error.

    Never recoverable at runtime - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """Configuration source or value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None, **kwargs: Any):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}", **kwargs)


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "EnrichmentError",
    "InvalidArgumentError",
    "ensure_not_none",
    "ConfigError",
    "InvalidConfigError",
]
