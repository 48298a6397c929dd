"""
Pydantic models for the create incident request.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from core.utils.constants import (
    DEFAULT_GRAVITES,
    TITLE_MAX_LENGTH,
    USER_ID_PATTERN,
)
from core.utils.time import parse_incident_date


class CreateIncidentRequest(BaseModel):
    """Validation model for incident creation."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str = Field(..., min_length=3, max_length=50, pattern=USER_ID_PATTERN)
    titre: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    date_incident: str = Field(..., description="YYYY-MM-DD")
    institution: str = Field(..., min_length=1, max_length=100)
    type: str = Field(..., min_length=1, max_length=100)
    gravite: str = Field(..., description="One of Faible, Moyenne, Haute, Critique")

    faits: str = Field("", max_length=20000, description="Factual elements only")
    dysfonctionnement: str = Field("", max_length=20000)
    transmis_jp: StrictBool = False
    email_id: str | None = Field(None, max_length=200)

    @field_validator("date_incident")
    @classmethod
    def validate_date_incident(cls, value: str) -> str:
        return parse_incident_date(value).isoformat()

    @field_validator("gravite")
    @classmethod
    def validate_gravite(cls, value: str) -> str:
        if value not in DEFAULT_GRAVITES:
            raise ValueError(f"gravite must be one of: {', '.join(DEFAULT_GRAVITES)}")
        return value
