"""
Lambda handler responsible for incident updates.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.incident import Incident
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import UpdateIncidentRequest
from .service import UpdateService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``PATCH /incidents/{incident_id}``.

    The JSON body holds the fields to change. Changing gravity, type or
    transmission re-scores the incident.
    """
    request_id = getattr(context, "aws_request_id", None)
    path_params = event.get("pathParameters") or {}

    logger.info(
        "Received incident update request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "incident_id": path_params.get("incident_id"),
            "request_id": request_id,
        },
    )

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return ResponseBuilder.bad_request(
            "Invalid JSON body",
            request_id=request_id,
        )

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request(
            "Invalid request body: expected a JSON object",
            request_id=request_id,
        )

    is_valid, result = validate_request(
        UpdateIncidentRequest,
        {**body, "incident_id": path_params.get("incident_id")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: UpdateIncidentRequest = result
    incident = UpdateService().update_incident(request)

    metrics.add_metric(name="IncidentUpdated", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.ok(
        {"incident": Incident.from_item(incident).model_dump()},
        request_id=request_id,
    )
