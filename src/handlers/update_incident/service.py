"""Business logic for incident updates.

Merges the requested changes into the stored incident, re-scores it when
a scoring input changed, and writes it back.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_incidents import DynamoDBIncidents
from core.repositories.incident_repository import IncidentRepository
from core.scoring.priority import calculate_incident_metrics
from core.utils.constants import RESCORING_FIELDS
from core.utils.time import utc_now_iso
from handlers.get_incident.service import GetService

from .models import UpdateIncidentRequest

logger = Logger(UTC=True)


class UpdateService:
    """Application service responsible for updating incidents."""

    def __init__(self, repository: IncidentRepository | None = None) -> None:
        self.incidents: IncidentRepository = repository or DynamoDBIncidents()

    def update_incident(self, request: UpdateIncidentRequest) -> dict[str, Any]:
        """Apply a partial update and return the stored incident.

        Raises:
            NotFoundError: If no incident has this id
            DynamoDBError: If the read or the write fails
        """
        changes = request.changes()
        current = GetService(self.incidents).get_incident(request.incident_id)

        incident: dict[str, Any] = {**current, **changes}

        rescored = bool(RESCORING_FIELDS & changes.keys())
        if rescored:
            score, priorite = calculate_incident_metrics(
                gravite=incident["gravite"],
                incident_type=incident["type"],
                transmis_jp=bool(incident.get("transmis_jp", False)),
            )
            incident["score"] = score
            incident["priorite"] = priorite

        incident["updated_at"] = utc_now_iso()

        self.incidents.update_incident(incident=incident)

        logger.info(
            "Incident updated",
            extra={
                "incident_id": request.incident_id,
                "fields": sorted(changes),
                "rescored": rescored,
            },
        )
        return incident
