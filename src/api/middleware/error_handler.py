"""Error types raised by the upload workflow and the middleware that renders them."""

import logging
import traceback
from typing import Any, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from src.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

# Message returned for every server-side failure of the upload workflow
UPLOAD_FAILED_MESSAGE = "Upload failed"


class APIError(Exception):
    """Base exception for errors returned to the client.

    Carries the HTTP status and a short error type alongside the message.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_type: str = "api_error",
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(message)


class ValidationError(APIError):
    """Missing or malformed client input."""

    def __init__(self, message: str = "Validation error") -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_type="validation_error",
        )


class NotFoundError(APIError):
    """No profile record matched the request."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_type="not_found",
        )


class UpstreamError(APIError):
    """The media host rejected or failed an upload.

    The client only ever sees a generic message; the cause is logged.
    """

    def __init__(self, message: str = UPLOAD_FAILED_MESSAGE) -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_type="upstream_error",
        )


class PersistenceError(APIError):
    """A database read or write failed."""

    def __init__(self, message: str = UPLOAD_FAILED_MESSAGE) -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_type="persistence_error",
        )


def create_error_response(
    error_type: str,
    message: str,
    status_code: int,
    request_id: str | None = None,
) -> JSONResponse:
    """Render an ErrorResponse body with the given status.

    Args:
        error_type: Short error type, e.g. ``not_found``.
        message: Text shown to the client.
        status_code: HTTP status code.
        request_id: Optional request ID for tracing.

    Returns:
        JSONResponse: Formatted error response.
    """
    body = ErrorResponse(error=error_type, message=message, request_id=request_id)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def error_handler_middleware(request: Request, call_next: Callable[[Request], Any]) -> Response:
    """Convert exceptions escaping the routes into ErrorResponse JSON.

    APIErrors keep their status and message. Anything else becomes a
    generic 500 and its traceback goes to the log only.

    Args:
        request: The incoming request.
        call_next: Next middleware or route handler.

    Returns:
        Response: Either the successful response or formatted error response.
    """
    request_id = request.headers.get("X-Request-ID")

    try:
        return await call_next(request)

    except APIError as e:
        logger.warning(
            "API error: %s - %s",
            e.error_type,
            e.message,
            extra={"request_id": request_id, "status_code": e.status_code},
        )
        return create_error_response(
            error_type=e.error_type,
            message=e.message,
            status_code=e.status_code,
            request_id=request_id,
        )

    except Exception as e:
        logger.error(
            "Unhandled exception: %s\n%s",
            str(e),
            traceback.format_exc(),
            extra={"request_id": request_id},
        )
        return create_error_response(
            error_type="internal_error",
            message="An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id=request_id,
        )
