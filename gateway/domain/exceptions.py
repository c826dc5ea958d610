"""Domain exceptions for the tenant gateway.

Defines domain-level exceptions raised by the resolver, the feature gate
and the request pipeline. Presentation layer maps them to HTTP responses
in exception handlers (see gateway.core.exception_handlers).
"""

from typing import Any


class GatewayException(Exception):
    """Base exception for all gateway errors.

    Attributes:
        message: Human-readable error description (returned as ``error``).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, tenant_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the public error body."""
        return {"error": self.message}


class ValidationException(GatewayException):
    """Raised when a tenant id or request field is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or header that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class TenantNotFoundException(GatewayException):
    """Raised when the directory has no record for a tenant id."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(
            "Tenant not found",
            "TENANT_NOT_FOUND",
            {"tenant_id": tenant_id},
        )


class FeatureDisabledException(GatewayException):
    """Raised when a tenant's feature flags do not allow the requested feature."""

    def __init__(self, feature: str) -> None:
        """Initialize with the denied feature name.

        Args:
            feature: Feature flag name (e.g. 'analytics', 'chat').
        """
        self.feature = feature
        super().__init__(
            f"{feature} not enabled for this tenant",
            "FEATURE_DISABLED",
            {"feature": feature},
        )


class InternalException(GatewayException):
    """Raised when the directory, cache or a handler fails unexpectedly.

    The underlying reason is kept in details["reason"]; exception handlers
    decide whether to surface it (EXPOSE_ERROR_DETAILS).
    """

    def __init__(
        self, message: str = "Internal server error", reason: str | None = None
    ) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__(message, "INTERNAL_ERROR", details)
