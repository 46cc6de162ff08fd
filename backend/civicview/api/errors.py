"""Maps domain exceptions to JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from civicview.exceptions import (
    CivicViewError,
    DuplicateRatingError,
    InsufficientComparisonTargetsError,
    InvalidDataError,
    NotFoundError,
    StoreFailureError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[CivicViewError], int] = {
    NotFoundError: 404,
    InvalidDataError: 400,
    DuplicateRatingError: 400,
    InsufficientComparisonTargetsError: 400,
    StoreFailureError: 500,
}


def _error_body(message: str, errors: dict[str, list[str]] | None = None) -> dict:
    body: dict = {"message": message}
    if errors:
        body["errors"] = errors
    return body


def flatten_validation_errors(errors) -> dict[str, list[str]]:
    """Group pydantic error entries by dotted field path, dropping the location prefix."""
    flattened: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        flattened.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return flattened


async def civicview_error_handler(request: Request, exc: CivicViewError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), 500)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    errors = exc.errors if isinstance(exc, InvalidDataError) else None
    return JSONResponse(status_code=status_code, content=_error_body(exc.message, errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=_error_body("Invalid request data", flatten_validation_errors(exc.errors())),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CivicViewError, civicview_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
