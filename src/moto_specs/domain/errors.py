"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus structured context that
    protocol adapters can serialize.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Empty sort key
        - Sort order that is not ascending/descending

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "sort_key", "message": "Must not be empty"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class QueryValidationError(ValidationError):
    """Raised when a query state cannot be executed."""

    pass


class DataSourceUnavailableError(DomainError):
    """The motorcycle dataset could not be retrieved from its source.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "DATA_SOURCE_UNAVAILABLE"


class DatasetNotLoadedError(DataSourceUnavailableError):
    """No dataset has been loaded yet (initial fetch pending or never started).

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "DATASET_NOT_LOADED"

    def __init__(self, message: str = "Motorcycle catalog is still loading", **context: Any) -> None:
        super().__init__(message, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
