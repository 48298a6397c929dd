"""
Business logic for incident listing and filtering.
"""

from dataclasses import dataclass
from typing import Any

from aws_lambda_powertools import Logger

from core.filters.in_memory_incident_filter import InMemoryIncidentFilter
from core.infrastructure.aws.dynamodb_incidents import DynamoDBIncidents
from core.models.errors import FilterError
from core.repositories.incident_repository import IncidentRepository
from core.utils.constants import (
    ALLOWED_SORT_FIELDS,
    ALLOWED_SORT_ORDERS,
    get_fetch_batch_size,
    get_fetch_max_rows,
)

IncidentItem = dict[str, Any]

logger = Logger(UTC=True)


@dataclass(frozen=True)
class IncidentListing:
    """One page of incidents plus the bounds of the load behind it.

    ``capped`` is True only when the user has more incidents than
    ``max_rows`` and the load therefore left some out.
    """

    items: list[IncidentItem]
    total_count: int
    has_more: bool
    batch_size: int
    max_rows: int
    loaded_count: int
    capped: bool


class ListService:
    """Application service responsible for listing user incidents.

    This service coordinates:
    - Bulk-reading incidents from DynamoDB through the bounded paginator
    - Applying optional in-memory refinement filters
    - Sorting and paginating results
    """

    def __init__(
        self,
        repository: IncidentRepository | None = None,
        *,
        batch_size: int | None = None,
        max_rows: int | None = None,
    ) -> None:
        """Initialize list service with required dependencies."""
        self.incidents: IncidentRepository = repository or DynamoDBIncidents()
        self.filters = InMemoryIncidentFilter()
        self.batch_size = batch_size if batch_size is not None else get_fetch_batch_size()
        self.max_rows = max_rows if max_rows is not None else get_fetch_max_rows()

    def list_incidents(
        self,
        *,
        user_id: str,
        statut: str | None,
        institution: str | None,
        search: str | None,
        offset: int,
        limit: int,
        sort_by: str | None,
        sort_order: str | None,
        incident_type: str | None = None,
        gravite: str | None = None,
        date_debut: str | None = None,
        date_fin: str | None = None,
    ) -> IncidentListing:
        """List incidents with filtering, sorting, and pagination.

        One row beyond ``max_rows`` is requested from the store so that a
        user with exactly ``max_rows`` incidents is not reported as capped.

        Raises:
            ValueError: If pagination parameters are invalid
            FilterError: If the sort configuration or date range is invalid
            DynamoDBError: If the bulk read fails
        """
        if date_debut and date_fin and date_debut > date_fin:
            raise FilterError(
                message="Invalid date range: date_debut is after date_fin",
                details={"date_debut": date_debut, "date_fin": date_fin},
            )

        # Step 1: Bulk read (status filtering in DynamoDB)
        # A non-positive cap is passed through untouched so it still loads nothing.
        read_rows = self.max_rows + 1 if self.max_rows > 0 else self.max_rows
        items = self.incidents.list_user_incidents(
            user_id=user_id,
            batch_size=self.batch_size,
            max_rows=read_rows,
            statut=statut,
        )

        capped = self.max_rows > 0 and len(items) > self.max_rows
        if capped:
            items = items[: self.max_rows]
            logger.warning(
                "Incident load truncated at max_rows",
                extra={"user_id": user_id, "max_rows": self.max_rows},
            )
        loaded_count = len(items)

        # Step 2: In-memory refinement
        items = self.filters.apply(
            items,
            institution=institution,
            incident_type=incident_type,
            gravite=gravite,
            date_debut=date_debut,
            date_fin=date_fin,
            search=search,
        )

        # Step 3: Sorting
        items = self._sort_items(items, sort_by=sort_by, sort_order=sort_order)

        # Step 4: Offset pagination
        page_items, total, has_more = self.filters.paginate(
            items,
            offset=offset,
            limit=limit,
        )

        logger.info(
            "Incidents listed successfully",
            extra={
                "user_id": user_id,
                "loaded": loaded_count,
                "matched": total,
                "count": len(page_items),
            },
        )

        return IncidentListing(
            items=page_items,
            total_count=total,
            has_more=has_more,
            batch_size=self.batch_size,
            max_rows=self.max_rows,
            loaded_count=loaded_count,
            capped=capped,
        )

    @staticmethod
    def _sort_items(
        items: list[IncidentItem],
        *,
        sort_by: str | None,
        sort_order: str | None,
    ) -> list[IncidentItem]:
        """Sort incidents by the requested field."""
        field = sort_by or "created_at"
        order = sort_order or "desc"

        if field not in ALLOWED_SORT_FIELDS or order not in ALLOWED_SORT_ORDERS:
            raise FilterError(
                message="Invalid sort configuration",
                details={"sort_by": sort_by, "sort_order": sort_order},
            )

        if field == "score":
            return sorted(
                items,
                key=lambda item: int(item.get("score") or 0),
                reverse=order == "desc",
            )

        return sorted(
            items,
            key=lambda item: str(item.get(field) or ""),
            reverse=order == "desc",
        )
