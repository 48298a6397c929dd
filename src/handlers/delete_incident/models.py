"""Pydantic models for delete incident request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.utils.constants import INCIDENT_ID_PREFIX


class DeleteIncidentRequest(BaseModel):
    """Validation model for delete incident request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    incident_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Incident ID to delete",
    )

    @field_validator("incident_id")
    @classmethod
    def validate_incident_id_prefix(cls, value: str) -> str:
        if not value.startswith(INCIDENT_ID_PREFIX):
            raise ValueError(f"incident_id must start with '{INCIDENT_ID_PREFIX}'")
        return value


class DeleteIncidentResponse(BaseModel):
    """Response model for successful incident deletion."""

    incident_id: str = Field(..., description="Deleted incident ID")
    message: str = Field(..., description="Success message")
    deleted_at: str = Field(..., description="Deletion timestamp")
