"""
Lambda handler responsible for incident retrieval.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.incident import Incident
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetIncidentRequest
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``GET /incidents/{incident_id}``.

    Not-found and storage failures surface as domain errors and are
    mapped to 404 / 500 by ``api_gateway_handler``.
    """
    request_id = getattr(context, "aws_request_id", None)
    path_params = event.get("pathParameters") or {}

    logger.info(
        "Received incident read request",
        extra={
            "path": event.get("path"),
            "incident_id": path_params.get("incident_id"),
            "request_id": request_id,
        },
    )

    is_valid, result = validate_request(
        GetIncidentRequest,
        {"incident_id": path_params.get("incident_id")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: GetIncidentRequest = result
    item = GetService().get_incident(request.incident_id)

    return ResponseBuilder.ok(
        {"incident": Incident.from_item(item).model_dump()},
        request_id=request_id,
    )
