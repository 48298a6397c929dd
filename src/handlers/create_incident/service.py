"""Business logic for incident creation.

Scores the incident, assigns its identifier and timestamps, and persists
it through the incident repository.
"""

import uuid
from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_incidents import DynamoDBIncidents
from core.repositories.incident_repository import IncidentRepository
from core.scoring.priority import calculate_incident_metrics
from core.utils.constants import DEFAULT_STATUT, INCIDENT_ID_PREFIX
from core.utils.time import utc_now_iso

from .models import CreateIncidentRequest

logger = Logger(UTC=True)


class CreateService:
    """Application service responsible for creating incidents."""

    def __init__(self, repository: IncidentRepository | None = None) -> None:
        self.incidents: IncidentRepository = repository or DynamoDBIncidents()

    @staticmethod
    def generate_incident_id() -> str:
        """Generate a unique incident identifier."""
        return f"{INCIDENT_ID_PREFIX}{uuid.uuid4().hex}"

    def create_incident(self, request: CreateIncidentRequest) -> dict[str, Any]:
        """Build, score and store a new incident.

        Raises:
            DuplicateIncidentError: If the generated id already exists
            DynamoDBError: If the write fails
        """
        score, priorite = calculate_incident_metrics(
            gravite=request.gravite,
            incident_type=request.type,
            transmis_jp=request.transmis_jp,
        )
        now = utc_now_iso()

        incident: dict[str, Any] = {
            **request.model_dump(exclude_none=True),
            "incident_id": self.generate_incident_id(),
            "statut": DEFAULT_STATUT,
            "score": score,
            "priorite": priorite,
            "created_at": now,
            "updated_at": now,
        }

        self.incidents.create_incident(incident=incident)

        logger.info(
            "Incident scored and stored",
            extra={
                "incident_id": incident["incident_id"],
                "score": score,
                "priorite": priorite,
            },
        )
        return incident
