"""Shared incident model."""

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

from core.models.pagination import BulkFetchInfo, PaginationInfo


class Incident(BaseModel):
    """Incident returned by the Incident API."""

    incident_id: StrictStr = Field(..., description="Unique incident identifier")
    user_id: StrictStr = Field(..., description="Owner user identifier")
    titre: StrictStr = Field(..., description="Incident title")

    date_incident: StrictStr = Field(..., description="Date the incident occurred (YYYY-MM-DD)")
    institution: StrictStr = Field(..., description="Institution involved")
    type: StrictStr = Field(..., description="Incident type")
    gravite: StrictStr = Field(..., description="Incident gravity")
    statut: StrictStr = Field(..., description="Workflow status")

    faits: StrictStr = Field("", description="Factual elements only")
    dysfonctionnement: StrictStr = Field("", description="Legal qualification of the facts")

    transmis_jp: StrictBool = Field(False, description="Transmitted to the Justice de Paix")
    email_id: StrictStr | None = Field(None, description="Source email, when ingested from mail")

    score: StrictInt = Field(..., description="Weighted gravity/type score")
    priorite: Literal["faible", "moyen", "eleve", "critique"] = Field(
        ...,
        description="Priority band derived from the score",
    )

    created_at: StrictStr = Field(..., description="ISO-8601 creation timestamp (UTC)")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last update timestamp (UTC)")

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Incident":
        """Build from a DynamoDB item (numbers come back as Decimal)."""
        return cls(
            incident_id=item["incident_id"],
            user_id=item["user_id"],
            titre=item["titre"],
            date_incident=item["date_incident"],
            institution=item["institution"],
            type=item["type"],
            gravite=item["gravite"],
            statut=item["statut"],
            faits=item.get("faits") or "",
            dysfonctionnement=item.get("dysfonctionnement") or "",
            transmis_jp=bool(item.get("transmis_jp", False)),
            email_id=item.get("email_id"),
            score=int(item["score"]),
            priorite=item["priorite"],
            created_at=item["created_at"],
            updated_at=item.get("updated_at"),
        )


class ListIncidentsResponse(BaseModel):
    """Paginated response for listing incidents."""

    incidents: list[Incident] = Field(..., description="List of incidents")
    total_count: StrictInt = Field(..., description="Total number of incidents matching the query")
    returned_count: StrictInt = Field(..., description="Number of incidents returned in this response")
    pagination: PaginationInfo = Field(..., description="Pagination metadata")
    bulk_fetch: BulkFetchInfo = Field(..., description="Bounds of the underlying store read")
