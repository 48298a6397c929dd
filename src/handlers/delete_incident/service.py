"""Business logic for incident deletion."""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_incidents import DynamoDBIncidents
from core.repositories.incident_repository import IncidentRepository
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DeleteService:
    """Application service responsible for deleting incidents."""

    def __init__(self, repository: IncidentRepository | None = None) -> None:
        self.incidents: IncidentRepository = repository or DynamoDBIncidents()

    def delete_incident(self, incident_id: str) -> dict[str, Any]:
        """Delete an incident.

        Existence is checked by the conditional delete itself, so a
        missing incident costs one round trip.

        Raises:
            NotFoundError: If no incident has this id
            DynamoDBError: If deletion fails
        """
        logger.debug("Starting incident deletion", extra={"incident_id": incident_id})

        self.incidents.delete_incident(incident_id=incident_id)

        return {
            "incident_id": incident_id,
            "deleted_at": utc_now_iso(),
        }
