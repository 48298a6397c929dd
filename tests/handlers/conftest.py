import json
from types import SimpleNamespace
from typing import Any

import pytest

from core.models.errors import NotFoundError


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def create_incident_body() -> dict[str, Any]:
    return {
        "user_id": "john",
        "titre": "Refus d'accès au dossier",
        "date_incident": "2024-01-04",
        "institution": "Justice de paix",
        "type": "Accès aux pièces",
        "gravite": "Haute",
        "faits": "Demande écrite du 2 janvier restée sans réponse",
        "transmis_jp": False,
    }


@pytest.fixture
def create_incident_event(create_incident_body) -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": "/incidents",
        "body": json.dumps(create_incident_body),
        "headers": {"x-api-key": "test-api-key"},
    }


@pytest.fixture
def list_incidents_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/incidents",
        "queryStringParameters": {"user_id": "john"},
        "headers": {"x-api-key": "test-api-key"},
    }


class InMemoryIncidents:
    """Repository double holding incidents in a dict."""

    def __init__(self, items: list[dict[str, Any]] | None = None) -> None:
        self.items: dict[str, dict[str, Any]] = {
            item["incident_id"]: item for item in items or []
        }
        self.list_calls: list[dict[str, Any]] = []

    def create_incident(self, *, incident: dict[str, Any]) -> None:
        self.items[incident["incident_id"]] = incident

    def fetch_incident(self, *, incident_id: str) -> dict[str, Any] | None:
        return self.items.get(incident_id)

    def update_incident(self, *, incident: dict[str, Any]) -> None:
        if incident["incident_id"] not in self.items:
            raise NotFoundError(message="Incident not found")
        self.items[incident["incident_id"]] = incident

    def delete_incident(self, *, incident_id: str) -> None:
        if self.items.pop(incident_id, None) is None:
            raise NotFoundError(message="Incident not found")

    def list_user_incidents(
        self,
        *,
        user_id: str,
        batch_size: int,
        max_rows: int,
        statut: str | None = None,
    ) -> list[dict[str, Any]]:
        self.list_calls.append(
            {"user_id": user_id, "batch_size": batch_size, "max_rows": max_rows, "statut": statut}
        )
        matching = [
            item
            for item in self.items.values()
            if item["user_id"] == user_id and (statut is None or item["statut"] == statut)
        ]
        matching.sort(key=lambda item: item["created_at"], reverse=True)
        return matching[:max_rows]


@pytest.fixture
def in_memory_incidents(sample_incidents) -> InMemoryIncidents:
    return InMemoryIncidents(sample_incidents)


@pytest.fixture
def incident_repository_factory():
    return InMemoryIncidents
