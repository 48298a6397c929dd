"""Business logic for incident retrieval."""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_incidents import DynamoDBIncidents
from core.models.errors import NotFoundError
from core.repositories.incident_repository import IncidentRepository
from core.utils.constants import ERROR_CODE_INCIDENT_NOT_FOUND

logger = Logger(UTC=True)


class GetService:
    """Application service responsible for reading a single incident."""

    def __init__(self, repository: IncidentRepository | None = None) -> None:
        self.incidents: IncidentRepository = repository or DynamoDBIncidents()

    def get_incident(self, incident_id: str) -> dict[str, Any]:
        """Return the stored incident.

        Raises:
            NotFoundError: If no incident has this id
            DynamoDBError: If the read fails
        """
        item = self.incidents.fetch_incident(incident_id=incident_id)

        if item is None:
            logger.info("Incident not found", extra={"incident_id": incident_id})
            raise NotFoundError(
                message=f"Incident not found: {incident_id}",
                error_code=ERROR_CODE_INCIDENT_NOT_FOUND,
                details={"incident_id": incident_id},
            )

        return item
