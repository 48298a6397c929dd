import pytest

from core.models.errors import (
    DuplicateIncidentError,
    DynamoDBError,
    FilterError,
    IncidentOperationFailedError,
    IncidentServiceError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls,default_code",
    [
        (ValidationError, "VALIDATION_FAILED"),
        (NotFoundError, "NOT_FOUND"),
        (DuplicateIncidentError, "DUPLICATE_INCIDENT_ERROR"),
        (IncidentOperationFailedError, "INCIDENT_OPERATION_FAILED"),
        (DynamoDBError, "DYNAMODB_ERROR"),
        (FilterError, "INVALID_FILTER"),
    ],
)
def test_default_error_codes(error_cls, default_code) -> None:
    exc = error_cls(message="something failed")

    assert isinstance(exc, IncidentServiceError)
    assert exc.error_code == default_code
    assert exc.details == {}
    assert str(exc) == "something failed"


def test_custom_code_and_details() -> None:
    exc = DynamoDBError(
        message="Unable to list incidents",
        error_code="INCIDENT_LIST_FAILED",
        details={"user_id": "john"},
    )

    assert exc.error_code == "INCIDENT_LIST_FAILED"
    assert exc.details == {"user_id": "john"}


def test_dynamodb_error_is_an_operation_failure() -> None:
    assert issubclass(DynamoDBError, IncidentOperationFailedError)
