"""Attribute exception hierarchy for type-safe error handling.

Every error raised while declaring, resolving or interpolating cookbook
attributes derives from ``CookbookAttributeError``. Exceptions carry a
machine-readable error code and structured context so an orchestrator can
report a failed convergence without parsing messages.

Example:
    >>> from vcap.foundation.attributes.exceptions import UnknownAttributeError
    >>> raise UnknownAttributeError("ruby.flavour")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AttributeTemplateError",
    "AttributeValidationError",
    "CookbookAttributeError",
    "UnknownAttributeError",
]


class CookbookAttributeError(Exception):
    """Base class for all attribute errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (attribute keys, values).

    Example:
        >>> raise CookbookAttributeError("Load failed", context={"cookbook": "ruby"})
        CookbookAttributeError: Load failed (cookbook=ruby)
    """

    error_code: str = "ATTRIBUTE_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize attribute error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class UnknownAttributeError(CookbookAttributeError):
    """Raised when a key is not part of the cookbook's attribute schema.

    Attributes:
        error_code: "UNKNOWN_ATTRIBUTE" (class constant).
        key: The dotted attribute key that was requested.

    Example:
        >>> raise UnknownAttributeError("ruby.flavour")
        UnknownAttributeError: Unknown attribute: ruby.flavour (key=ruby.flavour)
    """

    error_code: str = "UNKNOWN_ATTRIBUTE"

    def __init__(self, key: str, **extra_context: Any) -> None:
        """Initialize unknown attribute error.

        Args:
            key: Dotted attribute key (e.g., "rubygems.bundler.version").
            **extra_context: Additional debugging context (e.g., cookbook).
        """
        self.key = key
        super().__init__(f"Unknown attribute: {key}", {"key": key, **extra_context})


class AttributeValidationError(CookbookAttributeError):
    """Raised when a known attribute holds an unusable value.

    Attributes:
        error_code: "ATTRIBUTE_VALIDATION_ERROR" (class constant).
        key: Dotted attribute key that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise AttributeValidationError("ruby.version", "must not be empty")
        AttributeValidationError: Invalid value for 'ruby.version': must not be empty
    """

    error_code: str = "ATTRIBUTE_VALIDATION_ERROR"

    def __init__(self, key: str, reason: str, **extra_context: Any) -> None:
        """Initialize validation error.

        Args:
            key: Dotted attribute key that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context (e.g., the value).
        """
        self.key = key
        self.reason = reason
        message = f"Invalid value for '{key}': {reason}"
        super().__init__(message, {"key": key, "reason": reason, **extra_context})


class AttributeTemplateError(CookbookAttributeError):
    """Raised when a templated attribute cannot be interpolated.

    Covers malformed templates, placeholders that name no known attribute,
    templates that omit a required placeholder and missing substitution values.

    Attributes:
        error_code: "ATTRIBUTE_TEMPLATE_ERROR" (class constant).
        template: The offending template string.
        reason: Why interpolation failed.
    """

    error_code: str = "ATTRIBUTE_TEMPLATE_ERROR"

    def __init__(self, template: str, reason: str, **extra_context: Any) -> None:
        """Initialize template error.

        Args:
            template: The template string that failed.
            reason: Human-readable failure reason.
            **extra_context: Additional debugging context (e.g., key).
        """
        self.template = template
        self.reason = reason
        message = f"Cannot interpolate template {template!r}: {reason}"
        super().__init__(message, {"reason": reason, **extra_context})
