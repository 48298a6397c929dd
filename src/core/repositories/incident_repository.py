"""Abstract contract for incident persistence."""

from abc import ABC, abstractmethod
from typing import Any

IncidentRecord = dict[str, Any]


class IncidentRepository(ABC):
    """Contract for storing and retrieving incidents.

    Implementations could be DynamoDB, PostgreSQL, Supabase, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def create_incident(self, *, incident: IncidentRecord) -> None:
        """Persist a new incident.

        Args:
            incident: Incident record with at least:
                     - incident_id: str
                     - user_id: str
                     - titre: str
                     - created_at: str (ISO-8601 UTC format)

        Raises:
            ValidationError: If required fields are missing
            DuplicateIncidentError: If the incident id already exists
            DynamoDBError: If creation fails for other reasons
        """

    @abstractmethod
    def fetch_incident(self, *, incident_id: str) -> IncidentRecord | None:
        """Fetch a single incident.

        Returns:
            Incident record or None if not found

        Raises:
            DynamoDBError: If fetch fails
        """

    @abstractmethod
    def update_incident(self, *, incident: IncidentRecord) -> None:
        """Replace a stored incident with its updated version.

        Raises:
            NotFoundError: If the incident does not exist
            DynamoDBError: If the write fails
        """

    @abstractmethod
    def delete_incident(self, *, incident_id: str) -> None:
        """Remove an incident.

        Raises:
            NotFoundError: If the incident does not exist
            DynamoDBError: If deletion fails
        """

    @abstractmethod
    def list_user_incidents(
        self,
        *,
        user_id: str,
        batch_size: int,
        max_rows: int,
        statut: str | None = None,
    ) -> list[IncidentRecord]:
        """Bulk-read a user's incidents, newest first.

        Args:
            user_id: Incident owner
            batch_size: Page size used for each store round trip
            max_rows: Hard cap on returned incidents
            statut: Optional status to filter on at the store level

        Returns:
            At most ``max_rows`` incident records. Empty when either bound
            is not strictly positive.

        Raises:
            DynamoDBError: If any page read fails
        """
