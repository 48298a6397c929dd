"""
Lambda handler responsible for incident creation.
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

from .models import CreateIncidentRequest
from .service import CreateService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``POST /incidents``.

    The JSON body is validated, scored and stored; the created incident is
    returned with status 201. Duplicates map to 409 through
    ``api_gateway_handler``.
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received incident create request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
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

    is_valid, result = validate_request(CreateIncidentRequest, body, request_id=request_id)
    if not is_valid:
        return result

    request: CreateIncidentRequest = result
    incident = CreateService().create_incident(request)

    metrics.add_metric(name="IncidentCreated", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.created(
        {"incident": Incident.from_item(incident).model_dump()},
        request_id=request_id,
    )
