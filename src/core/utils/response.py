"""
API Gateway proxy responses for the incident handlers.

Every response is JSON with CORS headers. Error bodies share one shape::

    {"error": <code>, "message": ..., "timestamp": ..., "details": ..., "request_id": ...}

``details`` and ``request_id`` are omitted when empty.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
    EXPOSE_HEADERS,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses.

    Status helpers accept ``error`` (code, defaults to the status name),
    ``details``, ``request_id`` and ``cors_origin`` as keywords.
    """

    @staticmethod
    def headers(cors_origin: str | None = None) -> dict[str, str]:
        return {
            "Content-Type": DEFAULT_CONTENT_TYPE,
            "Access-Control-Allow-Origin": cors_origin or CORS_ORIGIN,
            "Access-Control-Allow-Headers": CORS_HEADERS,
            "Access-Control-Allow-Methods": CORS_METHODS,
            "Access-Control-Expose-Headers": EXPOSE_HEADERS,
        }

    @staticmethod
    def json(
        status: HTTPStatus,
        body: JsonDict | None = None,
        *,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = dict(body or {})
        if request_id:
            payload["request_id"] = request_id

        # DynamoDB numbers come back as Decimal
        return {
            "statusCode": status.value,
            "headers": ResponseBuilder.headers(cors_origin),
            "body": json.dumps(payload, default=str),
        }

    @staticmethod
    def ok(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.json(HTTPStatus.OK, body, **kwargs)

    @staticmethod
    def created(body: JsonDict, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.json(HTTPStatus.CREATED, body, **kwargs)

    @staticmethod
    def preflight(*, cors_origin: str | None = None) -> JsonDict:
        """Empty 204 answer to a CORS preflight request."""
        return {
            "statusCode": HTTPStatus.NO_CONTENT.value,
            "headers": ResponseBuilder.headers(cors_origin),
            "body": "",
        }

    @staticmethod
    def error(
        status: HTTPStatus,
        message: str,
        *,
        error: str | None = None,
        details: Any = None,
        request_id: str | None = None,
        cors_origin: str | None = None,
    ) -> JsonDict:
        payload: JsonDict = {
            "error": error or status.name,
            "message": message,
            "timestamp": utc_now_iso(),
        }
        if details:
            payload["details"] = details

        return ResponseBuilder.json(
            status,
            payload,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    @staticmethod
    def bad_request(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.BAD_REQUEST, message, **kwargs)

    @staticmethod
    def validation_error(message: str = "Invalid request payload", **kwargs: Any) -> JsonDict:
        """422 with the ``VALIDATION_FAILED`` code unless another is given."""
        kwargs.setdefault("error", ERROR_CODE_VALIDATION_FAILED)
        return ResponseBuilder.error(HTTPStatus.UNPROCESSABLE_ENTITY, message, **kwargs)

    @staticmethod
    def forbidden(message: str = "Forbidden", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.FORBIDDEN, message, **kwargs)

    @staticmethod
    def not_found(message: str = "Resource not found", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.NOT_FOUND, message, **kwargs)

    @staticmethod
    def conflict(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.CONFLICT, message, **kwargs)

    @staticmethod
    def internal_error(message: str = "Internal server error", **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.INTERNAL_SERVER_ERROR, message, **kwargs)

    @staticmethod
    def service_unavailable(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.SERVICE_UNAVAILABLE, message, **kwargs)

    @staticmethod
    def gateway_timeout(message: str, **kwargs: Any) -> JsonDict:
        return ResponseBuilder.error(HTTPStatus.GATEWAY_TIMEOUT, message, **kwargs)
