"""
Incident filtering service for list operations.

Provides a coordination layer that applies filtering and pagination
strategies to in-memory incident collections. This service does
not perform data access and is intended to operate on pre-fetched items.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.filters.incident_search_filter import IncidentSearchFilter
from core.filters.offset_pagination import OffsetPagination

IncidentItem = dict[str, Any]
logger = Logger(UTC=True)


class InMemoryIncidentFilter:
    """
    Service responsible for filtering and paginating incidents.

    This class orchestrates in-memory refinement strategies:
    - Institution match (case-insensitive)
    - Exact matches on type and gravity
    - Inclusive ``date_incident`` range
    - Free-text search on title, facts and dysfunction
    - Offset-based pagination

    Status filtering is pushed down to DynamoDB and is not handled here.
    """

    def __init__(self) -> None:
        """Initialize filter components used for orchestration."""
        self._search: IncidentSearchFilter = IncidentSearchFilter()
        self._pagination: OffsetPagination = OffsetPagination()

    def apply(
        self,
        items: list[IncidentItem],
        *,
        institution: str | None = None,
        incident_type: str | None = None,
        gravite: str | None = None,
        date_debut: str | None = None,
        date_fin: str | None = None,
        search: str | None = None,
    ) -> list[IncidentItem]:
        """Run every refinement whose criterion is set, cheapest first."""
        items = self.filter_by_institution(items, institution=institution)
        items = self.filter_exact(items, field="type", value=incident_type)
        items = self.filter_exact(items, field="gravite", value=gravite)
        items = self.filter_by_date_range(items, date_debut=date_debut, date_fin=date_fin)
        return self.search(items, term=search)

    def filter_by_institution(
        self,
        items: list[IncidentItem],
        *,
        institution: str | None,
    ) -> list[IncidentItem]:
        """Keep incidents whose institution matches, ignoring case."""
        if not institution:
            return items

        wanted = institution.strip().lower()
        return [
            item
            for item in items
            if str(item.get("institution") or "").strip().lower() == wanted
        ]

    @staticmethod
    def filter_exact(
        items: list[IncidentItem],
        *,
        field: str,
        value: str | None,
    ) -> list[IncidentItem]:
        if not value:
            return items

        return [item for item in items if item.get(field) == value]

    @staticmethod
    def filter_by_date_range(
        items: list[IncidentItem],
        *,
        date_debut: str | None,
        date_fin: str | None,
    ) -> list[IncidentItem]:
        """Keep incidents dated within ``[date_debut, date_fin]``.

        Dates are YYYY-MM-DD strings, so string order is calendar order.
        Either bound may be omitted.
        """
        if not date_debut and not date_fin:
            return items

        result: list[IncidentItem] = []
        for item in items:
            day = str(item.get("date_incident") or "")
            if date_debut and day < date_debut:
                continue
            if date_fin and day > date_fin:
                continue
            result.append(item)

        return result

    def search(
        self,
        items: list[IncidentItem],
        *,
        term: str | None,
    ) -> list[IncidentItem]:
        if not term:
            return items

        result: list[IncidentItem] = self._search.apply(items, term)
        return result

    def paginate(
        self,
        items: list[IncidentItem],
        *,
        offset: int,
        limit: int,
    ) -> tuple[list[IncidentItem], int, bool]:
        """
        Apply offset-based pagination to a list of items.

        Returns:
            A tuple of (page, total_count, has_more)

        Raises:
            ValueError: If pagination parameters are invalid
        """
        is_valid, error_message = self._pagination.validate(limit, offset)
        if not is_valid:
            logger.error(
                "Invalid pagination parameters",
                extra={
                    "limit": limit,
                    "offset": offset,
                    "error": error_message,
                },
            )
            raise ValueError(error_message)

        return self._pagination.paginate(items, offset, limit)
