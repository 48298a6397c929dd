"""
Pydantic models for list incidents request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MAX_LIMIT,
    MIN_LIMIT,
    USER_ID_PATTERN,
)
from core.utils.time import parse_incident_date


class ListIncidentsRequest(BaseModel):
    """
    Validation model for list incidents API.

    Filters:
    - statut → DynamoDB-level (filter expression)
    - institution, type, gravite, date range, search → in-memory
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str = Field(..., min_length=3, max_length=50, pattern=USER_ID_PATTERN)

    statut: str | None = Field(None, description="Exact workflow status")
    institution: str | None = Field(None, description="Institution, case-insensitive")
    type: str | None = Field(None, description="Exact incident type")
    gravite: str | None = Field(None, description="Exact gravity")
    date_debut: str | None = Field(None, description="Earliest date_incident, inclusive")
    date_fin: str | None = Field(None, description="Latest date_incident, inclusive")
    search: str | None = Field(
        None,
        max_length=200,
        description="Substring match on title, facts and dysfunction",
    )

    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description="Results per page (1-100)",
    )
    offset: int = Field(
        default=DEFAULT_OFFSET,
        ge=0,
        description="Pagination offset",
    )

    sort_by: Literal["created_at", "score", "date_incident"] = Field(
        default="created_at",
        description="Sort field",
    )
    sort_order: Literal["asc", "desc"] = Field(
        default="desc",
        description="Sort order",
    )

    @field_validator("date_debut", "date_fin")
    @classmethod
    def validate_dates(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return parse_incident_date(value).isoformat()
