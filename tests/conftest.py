"""
Pytest configuration and fixtures for incident-store tests.
Provides AWS mocking, a DynamoDB table fixture and sample incidents.
"""

import os
from collections.abc import Callable
from typing import Any

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("INCIDENT_TABLE_NAME", "incidents-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "incident-store")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "IncidentStore")

import boto3  # noqa: E402
import pytest  # noqa: E402
from moto import mock_aws  # noqa: E402


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_incident_table(dynamodb_resource):
    """Helper to create the incident table with its GSI."""
    return dynamodb_resource.create_table(
        TableName=os.getenv("INCIDENT_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "incident_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "incident_id", "AttributeType": "S"},
            {"AttributeName": "user_id", "AttributeType": "S"},
            {"AttributeName": "created_at", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": "user-created-index",
                "KeySchema": [
                    {"AttributeName": "user_id", "KeyType": "HASH"},
                    {"AttributeName": "created_at", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the incident table for a test.

    moto discards the table when the mock context exits.
    """
    table = _create_incident_table(dynamodb_resource)
    table.wait_until_exists()
    yield table


@pytest.fixture
def dynamodb_put_multiple_items(
    dynamodb_table,
) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """
    Helper to insert several items.

    Usage:
        items = dynamodb_put_multiple_items([item1, item2])
    """

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with dynamodb_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    def _get(incident_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"incident_id": incident_id})
        return response.get("Item")

    return _get


def make_incident(
    index: int,
    *,
    user_id: str = "john",
    **overrides: Any,
) -> dict[str, Any]:
    """Build a stored incident item; ``index`` orders ``created_at``."""
    item: dict[str, Any] = {
        "incident_id": f"inc_{index:04d}",
        "user_id": user_id,
        "titre": f"Incident {index}",
        "date_incident": "2024-01-01",
        "institution": "SCTP",
        "type": "Délais",
        "gravite": "Moyenne",
        "statut": "Ouvert",
        "faits": "",
        "dysfonctionnement": "",
        "transmis_jp": False,
        "score": 11,
        "priorite": "moyen",
        "created_at": f"2024-01-01T10:{index // 60:02d}:{index % 60:02d}+00:00",
    }
    item.update(overrides)
    return item


@pytest.fixture
def incident_factory() -> Callable[..., dict[str, Any]]:
    return make_incident


@pytest.fixture
def sample_incidents() -> list[dict[str, Any]]:
    """Incidents for two users with varied institutions, statuses and scores."""
    return [
        make_incident(
            1,
            titre="Refus d'accès au dossier",
            faits="Demande d'accès aux pièces restée sans réponse",
            institution="Justice de paix",
            type="Accès aux pièces",
            gravite="Haute",
            score=22,
            priorite="eleve",
            date_incident="2024-01-05",
        ),
        make_incident(
            2,
            titre="Courriel sans réponse",
            institution="SCTP",
            type="Communication",
            gravite="Faible",
            score=7,
            priorite="faible",
            statut="Résolu",
            date_incident="2024-01-02",
        ),
        make_incident(
            3,
            titre="Délai de recours dépassé",
            faits="Notification reçue hors délai",
            institution="SCTP",
            type="Délais",
            gravite="Critique",
            score=28,
            priorite="critique",
            date_incident="2024-01-03",
        ),
        make_incident(
            4,
            user_id="alice",
            titre="Rapport non transmis",
            institution="Curatelle",
            type="Transparence",
            gravite="Moyenne",
            score=12,
            priorite="moyen",
        ),
    ]


@pytest.fixture
def dynamodb_with_incidents(
    dynamodb_put_multiple_items,
    sample_incidents,
) -> list[dict[str, Any]]:
    """Incident table pre-populated with ``sample_incidents``."""
    items: list[dict[str, Any]] = dynamodb_put_multiple_items(sample_incidents)
    return items
