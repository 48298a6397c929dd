"""
Lambda handler responsible for deleting an incident.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import DeleteIncidentRequest, DeleteIncidentResponse
from .service import DeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``DELETE /incidents/{incident_id}``.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)
    path_params = event.get("pathParameters") or {}

    logger.info(
        "Received incident delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    is_valid, result = validate_request(
        DeleteIncidentRequest,
        {"incident_id": path_params.get("incident_id")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: DeleteIncidentRequest = result
    delete_result = DeleteService().delete_incident(request.incident_id)

    metrics.add_metric(name="IncidentDeleted", unit=MetricUnit.Count, value=1)

    response = DeleteIncidentResponse(
        incident_id=delete_result["incident_id"],
        message="Incident deleted successfully",
        deleted_at=delete_result["deleted_at"],
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
