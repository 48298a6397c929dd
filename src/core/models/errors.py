"""Custom exception classes for the incident service.

Each error carries a stable ``error_code`` that ends up in the API
response body; subclasses only differ by their default code.
"""

from typing import Any, ClassVar

from core.utils.constants import (
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_INCIDENT_DUPLICATE,
    ERROR_CODE_INCIDENT_OPERATION_FAILED,
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_VALIDATION_FAILED,
)


class IncidentServiceError(Exception):
    """
    Base exception for all incident service errors.

    ``error_code`` defaults to the class's ``default_error_code``;
    ``details`` holds JSON-serializable context for the client.
    """

    default_error_code: ClassVar[str] = ERROR_CODE_INCIDENT_OPERATION_FAILED

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(IncidentServiceError):
    """Raised when an incident fails a domain rule outside request parsing."""

    default_error_code = ERROR_CODE_VALIDATION_FAILED


class NotFoundError(IncidentServiceError):
    default_error_code = ERROR_CODE_RESOURCE_NOT_FOUND


class DuplicateIncidentError(IncidentServiceError):
    default_error_code = ERROR_CODE_INCIDENT_DUPLICATE


class IncidentOperationFailedError(IncidentServiceError):
    """Raised when an incident operation fails."""


class DynamoDBError(IncidentOperationFailedError):
    """Raised when a DynamoDB operation fails."""

    default_error_code = ERROR_CODE_DYNAMODB


class FilterError(IncidentServiceError):
    """Raised when list filter or sort parameters are inconsistent."""

    default_error_code = ERROR_CODE_INVALID_FILTER
