"""
Lambda handler responsible for listing incidents with optional filtering and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.filters.offset_pagination import OffsetPagination
from core.models.incident import Incident, ListIncidentsResponse
from core.models.pagination import BulkFetchInfo, PaginationInfo
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListIncidentsRequest
from .service import ListService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list incidents.

    Supports:
    - Filtering by status (DynamoDB-level)
    - Filtering by institution, type, gravity, date range and free text (in-memory)
    - Sorting and offset-based pagination

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received incident list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    params = event.get("queryStringParameters") or {}

    is_valid, result = validate_request(ListIncidentsRequest, params, request_id=request_id)
    if not is_valid:
        return result

    request: ListIncidentsRequest = result
    listing = ListService().list_incidents(
        user_id=request.user_id,
        statut=request.statut,
        institution=request.institution,
        incident_type=request.type,
        gravite=request.gravite,
        date_debut=request.date_debut,
        date_fin=request.date_fin,
        search=request.search,
        offset=request.offset,
        limit=request.limit,
        sort_by=request.sort_by,
        sort_order=request.sort_order,
    )

    incidents: list[Incident] = []

    for item in listing.items:
        try:
            incidents.append(Incident.from_item(item))
        except Exception as exc:
            logger.warning("Skipping malformed incident", exc_info=exc)

    metrics.add_metric(name="IncidentsListed", unit=MetricUnit.Count, value=len(incidents))

    response = ListIncidentsResponse(
        incidents=incidents,
        total_count=listing.total_count,
        returned_count=len(incidents),
        pagination=PaginationInfo(
            limit=request.limit,
            offset=request.offset,
            has_more=listing.has_more,
            next_offset=OffsetPagination.next_offset(
                request.offset,
                len(listing.items),
                listing.has_more,
            ),
        ),
        bulk_fetch=BulkFetchInfo(
            batch_size=listing.batch_size,
            max_rows=listing.max_rows,
            loaded_count=listing.loaded_count,
            capped=listing.capped,
        ),
    )

    return ResponseBuilder.ok(response.model_dump(), request_id=request_id)
