"""
Pydantic models for the update incident request.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
    model_validator,
)

from core.utils.constants import (
    DEFAULT_GRAVITES,
    DEFAULT_STATUTS,
    INCIDENT_ID_PREFIX,
    TITLE_MAX_LENGTH,
)
from core.utils.time import parse_incident_date


class UpdateIncidentRequest(BaseModel):
    """Partial update of an incident.

    Only the fields present in the body change. ``user_id``, the score
    and the timestamps are not client-writable.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    incident_id: StrictStr = Field(..., min_length=1, description="Incident ID to update")

    titre: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    date_incident: str | None = Field(None, description="YYYY-MM-DD")
    institution: str | None = Field(None, min_length=1, max_length=100)
    type: str | None = Field(None, min_length=1, max_length=100)
    gravite: str | None = None
    statut: str | None = None
    faits: str | None = Field(None, max_length=20000)
    dysfonctionnement: str | None = Field(None, max_length=20000)
    transmis_jp: StrictBool | None = None
    email_id: str | None = Field(None, max_length=200)

    @field_validator("incident_id")
    @classmethod
    def validate_incident_id_prefix(cls, value: str) -> str:
        if not value.startswith(INCIDENT_ID_PREFIX):
            raise ValueError(f"incident_id must start with '{INCIDENT_ID_PREFIX}'")
        return value

    @field_validator("date_incident")
    @classmethod
    def validate_date_incident(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return parse_incident_date(value).isoformat()

    @field_validator("gravite")
    @classmethod
    def validate_gravite(cls, value: str | None) -> str | None:
        if value is not None and value not in DEFAULT_GRAVITES:
            raise ValueError(f"gravite must be one of: {', '.join(DEFAULT_GRAVITES)}")
        return value

    @field_validator("statut")
    @classmethod
    def validate_statut(cls, value: str | None) -> str | None:
        if value is not None and value not in DEFAULT_STATUTS:
            raise ValueError(f"statut must be one of: {', '.join(DEFAULT_STATUTS)}")
        return value

    @model_validator(mode="after")
    def require_changes(self) -> "UpdateIncidentRequest":
        if not self.changes():
            raise ValueError("Missing fields to update")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields sent by the client with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"incident_id"})
