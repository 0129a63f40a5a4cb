"""Error translation for the motorcycle catalog API.

Every error leaves the API in the shape of ErrorResponse
(error_responses.py): a `detail` message, a machine-readable `code` and,
for query validation problems, per-field `errors`.

The catalog-specific paths are the data source ones. A failed fetch
(DATA_SOURCE_UNAVAILABLE) and a catalog that has not finished its first
load (DATASET_NOT_LOADED) are both 503s: the request was fine, the
dataset is just not available yet. Their detail is the static user-facing
message from the data source; transport details only reach the logs.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from moto_specs.domain.errors import DomainError

logger = logging.getLogger(__name__)

# Error code -> HTTP status; anything unlisted is a 400
STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "DATA_SOURCE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "DATASET_NOT_LOADED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a DomainError raised by the catalog use cases to a response.

    - QueryValidationError (bad search/sort state) → 422 with field errors
    - DataSourceUnavailableError (last fetch failed) → 503,
      detail "Failed to fetch motorcycles"
    - DatasetNotLoadedError (first load still running) → 503
    - InternalError → 500; any other code → 400

    An unavailable catalog is logged as a warning with the error context
    (e.g. the store's load state), other 5xx at error, client errors at info.
    """
    error_dict = exc.to_dict()
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        logger.warning(
            "Motorcycle catalog unavailable",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
            },
        )
    elif status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )

    response_content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Field-level errors only exist on ValidationError
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=response_content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for catalog query parameters FastAPI could not parse.

    e.g. sort_order=sideways, or a sort_key with characters outside
    [A-Za-z0-9_]. The `query` prefix is dropped from field names so
    clients see `sort_order`, not `query.sort_order`.
    """
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={
            "errors": errors,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError from DTO construction or mappers.

    Query DTOs injected through Depends() validate on construction, and
    pydantic's ValidationError is a ValueError, so constraint violations
    (e.g. an over-long sort_key) arrive here.
    """
    logger.info(
        "Value error",
        extra={
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": str(exc),
            "code": "INVALID_VALUE",
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything the catalog did not anticipate; traceback goes to the log only."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the catalog's handlers on app; build_app() calls this once."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
