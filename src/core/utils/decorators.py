"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import (
    DuplicateIncidentError,
    FilterError,
    IncidentServiceError,
    NotFoundError,
    ValidationError,
)
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]
ResponseFactory = Callable[..., JsonDict]

FRIENDLY_PREFIXES: tuple[str, ...] = (
    "Invalid",
    "Missing",
    "Required",
    "Must",
    "Cannot",
    "Unable to",
    "Failed to",
    "Incident",
    "Limit",
    "Offset",
    "User",
)

# Domain errors, most specific first. Anything else is a 500.
SERVICE_ERROR_RESPONSES: tuple[tuple[type[IncidentServiceError], ResponseFactory], ...] = (
    (NotFoundError, ResponseBuilder.not_found),
    (DuplicateIncidentError, ResponseBuilder.conflict),
    (ValidationError, ResponseBuilder.bad_request),
    (FilterError, ResponseBuilder.bad_request),
)

# Expected client-side outcomes, logged as warnings rather than exceptions.
EXPECTED_SERVICE_ERRORS = (NotFoundError, DuplicateIncidentError, ValidationError, FilterError)

# Builtin errors, in match order: subclasses (KeyError, PermissionError,
# TimeoutError) must precede LookupError / OSError.
# (types, response factory, fixed message or None for a friendly one, log level)
BUILTIN_ERROR_RESPONSES: tuple[
    tuple[tuple[type[Exception], ...], ResponseFactory, str | None, str], ...
] = (
    (
        (ValueError, KeyError, TypeError, AttributeError),
        ResponseBuilder.bad_request,
        None,
        "warning",
    ),
    (
        (PermissionError,),
        ResponseBuilder.forbidden,
        "You don't have permission to perform this action.",
        "warning",
    ),
    (
        (LookupError,),
        ResponseBuilder.not_found,
        "The requested resource was not found.",
        "warning",
    ),
    (
        (TimeoutError,),
        ResponseBuilder.gateway_timeout,
        "The request took too long to process. Please try again.",
        "exception",
    ),
    (
        (ConnectionError, OSError),
        ResponseBuilder.service_unavailable,
        "Unable to connect to required services. Please try again later.",
        "exception",
    ),
)


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Preserves specific validation messages while making generic errors friendly.
    """
    exc_str = str(exc)

    if exc_str and exc_str.startswith(FRIENDLY_PREFIXES):
        return exc_str

    if isinstance(exc, ValueError):
        return "The provided data is invalid. Please check your input and try again."

    if isinstance(exc, (KeyError, AttributeError)):
        return "A required field is missing. Please ensure all required fields are provided."

    if isinstance(exc, TypeError):
        return "The data format is incorrect. Please check the request format."

    return "We encountered an issue processing your request. Please try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def service_error_response(
    exc: IncidentServiceError,
    *,
    request_id: str | None = None,
) -> JsonDict:
    """Map a domain error onto its HTTP response, keeping its code and details."""
    factory: ResponseFactory = ResponseBuilder.internal_error
    for error_type, candidate in SERVICE_ERROR_RESPONSES:
        if isinstance(exc, error_type):
            factory = candidate
            break

    return factory(
        exc.message,
        error=exc.error_code,
        details=exc.details,
        request_id=request_id,
    )


def builtin_error_response(
    exc: Exception,
    *,
    handler_name: str,
    request_id: str | None = None,
) -> JsonDict:
    """Map a builtin exception onto an HTTP response; unknown types are a 500."""
    for error_types, factory, message, level in BUILTIN_ERROR_RESPONSES:
        if isinstance(exc, error_types):
            _log_error(
                f"{type(exc).__name__} in handler",
                handler_name=handler_name,
                request_id=request_id,
                exc=exc,
                level=level,
            )
            return factory(
                message or _get_user_friendly_message(exc),
                request_id=request_id,
            )

    _log_error(
        "Unexpected error in handler",
        handler_name=handler_name,
        request_id=request_id,
        exc=exc,
        level="exception",
    )
    return ResponseBuilder.internal_error(
        "We're experiencing technical difficulties. Please try again in a few moments.",
        request_id=request_id,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Domain error to HTTP status mapping
    - Request ID tracking and structured logging

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"status": "ok"})
    """

    @wraps(func)
    def wrapper(event: Any, context: Any) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.preflight()

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except IncidentServiceError as exc:
            expected = isinstance(exc, EXPECTED_SERVICE_ERRORS)
            _log_error(
                "Incident service error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="warning" if expected else "exception",
            )
            return service_error_response(exc, request_id=request_id)

        except Exception as exc:
            return builtin_error_response(
                exc,
                handler_name=func.__name__,
                request_id=request_id,
            )

    return wrapper
