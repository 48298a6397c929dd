from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.utils.constants import INCIDENT_ID_PREFIX


class GetIncidentRequest(BaseModel):
    """Validation model for get incident request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    incident_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Incident ID to retrieve",
    )

    @field_validator("incident_id")
    @classmethod
    def validate_incident_id_prefix(cls, value: str) -> str:
        if not value.startswith(INCIDENT_ID_PREFIX):
            raise ValueError(f"incident_id must start with '{INCIDENT_ID_PREFIX}'")
        return value
