"""DynamoDB-backed implementation of IncidentRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.infrastructure.aws.dynamodb_page_fetcher import DynamoDBPageFetcher
from core.models.errors import (
    DuplicateIncidentError,
    DynamoDBError,
    NotFoundError,
    ValidationError,
)
from core.pagination.bounded_paginator import fetch_all_sync
from core.repositories.incident_repository import IncidentRecord, IncidentRepository
from core.utils.constants import (
    ERROR_CODE_INCIDENT_CREATE_FAILED,
    ERROR_CODE_INCIDENT_DELETE_FAILED,
    ERROR_CODE_INCIDENT_FETCH_FAILED,
    ERROR_CODE_INCIDENT_INVALID,
    ERROR_CODE_INCIDENT_NOT_FOUND,
    ERROR_CODE_INCIDENT_UPDATE_FAILED,
    INDEX_USER_CREATED,
)

logger = Logger(UTC=True)

REQUIRED_FIELDS: tuple[str, ...] = ("incident_id", "user_id", "titre")

ITEM_EXISTS = "attribute_exists(incident_id)"
ITEM_ABSENT = "attribute_not_exists(incident_id)"


def _is_condition_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


def _check_required_fields(incident: IncidentRecord) -> None:
    for field in REQUIRED_FIELDS:
        value = incident.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                message=f"Incident must contain a non-empty '{field}'",
                error_code=ERROR_CODE_INCIDENT_INVALID,
                details={"field": field},
            )


def _not_found(incident_id: str) -> NotFoundError:
    return NotFoundError(
        message=f"Incident not found: {incident_id}",
        error_code=ERROR_CODE_INCIDENT_NOT_FOUND,
        details={"incident_id": incident_id},
    )


class DynamoDBIncidents(IncidentRepository):
    """DynamoDB-backed incident storage with error handling.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def create_incident(self, *, incident: IncidentRecord) -> None:
        """Persist a new incident.

        Raises:
            ValidationError: If the incident is missing required fields
            DuplicateIncidentError: If the incident id already exists
            DynamoDBError: If creation fails
        """
        _check_required_fields(incident)
        incident_id = incident["incident_id"]

        logger.debug(
            "Creating incident",
            extra={"incident_id": incident_id, "user_id": incident["user_id"]},
        )

        try:
            self._db.put_item(item=incident, condition_expression=ITEM_ABSENT)

        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"incident_id": incident_id})

            if _is_condition_failure(exc):
                raise DuplicateIncidentError(
                    message="This incident already exists",
                    details={"incident_id": incident_id},
                ) from exc

            raise DynamoDBError(
                message="Unable to save incident at this time",
                error_code=ERROR_CODE_INCIDENT_CREATE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error creating incident")
            raise DynamoDBError(
                message="Unable to save incident at this time",
                error_code=ERROR_CODE_INCIDENT_CREATE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        logger.info("Incident created", extra={"incident_id": incident_id})

    def fetch_incident(self, *, incident_id: str) -> IncidentRecord | None:
        """Fetch a single incident.

        Raises:
            DynamoDBError: If fetch fails
        """
        logger.debug("Fetching incident", extra={"incident_id": incident_id})

        try:
            response = self._db.get_item(key={"incident_id": incident_id})

        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"incident_id": incident_id})
            raise DynamoDBError(
                message="Unable to retrieve incident",
                error_code=ERROR_CODE_INCIDENT_FETCH_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching incident")
            raise DynamoDBError(
                message="Unable to retrieve incident",
                error_code=ERROR_CODE_INCIDENT_FETCH_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        item = response.get("Item")
        if item is not None and not isinstance(item, dict):
            raise DynamoDBError(
                message="Invalid incident format",
                error_code=ERROR_CODE_INCIDENT_FETCH_FAILED,
                details={"incident_id": incident_id},
            )

        return item

    def update_incident(self, *, incident: IncidentRecord) -> None:
        """Overwrite an existing incident with its updated version.

        Raises:
            ValidationError: If the incident is missing required fields
            NotFoundError: If the incident no longer exists
            DynamoDBError: If the write fails
        """
        _check_required_fields(incident)
        incident_id = incident["incident_id"]

        logger.debug("Updating incident", extra={"incident_id": incident_id})

        try:
            self._db.put_item(item=incident, condition_expression=ITEM_EXISTS)

        except ClientError as exc:
            if _is_condition_failure(exc):
                raise _not_found(incident_id) from exc

            logger.error("DynamoDB put_item failed", extra={"incident_id": incident_id})
            raise DynamoDBError(
                message="Unable to update incident at this time",
                error_code=ERROR_CODE_INCIDENT_UPDATE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error updating incident")
            raise DynamoDBError(
                message="Unable to update incident at this time",
                error_code=ERROR_CODE_INCIDENT_UPDATE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        logger.info("Incident updated", extra={"incident_id": incident_id})

    def delete_incident(self, *, incident_id: str) -> None:
        """Remove an incident.

        Raises:
            NotFoundError: If no incident has this id
            DynamoDBError: If deletion fails
        """
        logger.debug("Deleting incident", extra={"incident_id": incident_id})

        try:
            self._db.delete_item(
                key={"incident_id": incident_id},
                condition_expression=ITEM_EXISTS,
            )

        except ClientError as exc:
            if _is_condition_failure(exc):
                raise _not_found(incident_id) from exc

            logger.error("DynamoDB delete_item failed", extra={"incident_id": incident_id})
            raise DynamoDBError(
                message="Unable to delete incident at this time",
                error_code=ERROR_CODE_INCIDENT_DELETE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting incident")
            raise DynamoDBError(
                message="Unable to delete incident at this time",
                error_code=ERROR_CODE_INCIDENT_DELETE_FAILED,
                details={"incident_id": incident_id},
            ) from exc

        logger.info("Incident deleted", extra={"incident_id": incident_id})

    def list_user_incidents(
        self,
        *,
        user_id: str,
        batch_size: int,
        max_rows: int,
        statut: str | None = None,
    ) -> list[IncidentRecord]:
        """Bulk-read a user's incidents, newest first.

        NOTE:
        - Pages are read through the bounded paginator; a failing page
          aborts the whole read with no partial result.
        - Status filtering happens in DynamoDB (filter expression).
        """
        logger.debug(
            "Listing user incidents",
            extra={
                "user_id": user_id,
                "batch_size": batch_size,
                "max_rows": max_rows,
                "statut": statut,
            },
        )

        query_kwargs: dict[str, Any] = {
            "IndexName": INDEX_USER_CREATED,
            "KeyConditionExpression": Key("user_id").eq(user_id),
            "ScanIndexForward": False,
        }

        if statut:
            query_kwargs["FilterExpression"] = Attr("statut").eq(statut)

        fetcher = DynamoDBPageFetcher(
            self._db,
            query_kwargs=query_kwargs,
            log_context={"user_id": user_id},
        )

        items = fetch_all_sync(fetcher, batch_size, max_rows)

        logger.info(
            "User incidents listed",
            extra={"user_id": user_id, "count": len(items)},
        )
        return items
