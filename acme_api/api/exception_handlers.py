"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from acme_api.errors import (
    BUSINESS_RULE_VIOLATION,
    NOT_FOUND,
    STORAGE_FAILURE,
    VALIDATION_ERROR,
    BusinessRuleViolationError,
    NotFoundError,
)
from acme_api.schemas.error import ErrorItem, ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    detail: str,
    code: str,
    errors: list[ErrorItem] | None = None,
) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def field_errors(exc: RequestValidationError) -> list[ErrorItem]:
    """
    Flatten request validation errors into one entry per offending field.

    The location prefix ("body", "path", ...) is dropped, so a bad
    ``ageOfDriver`` in the JSON body is reported as field ``ageOfDriver``.
    """
    items = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        items.append(ErrorItem(field=".".join(loc) or None, message=error["msg"]))
    return items


def business_rule_violation_handler(
    _request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_409_CONFLICT,
        "Business rule violation",
        BUSINESS_RULE_VIOLATION,
        errors=[ErrorItem(name=exc.violation.name, message=exc.violation.message)],
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "Request validation failed",
        VALIDATION_ERROR,
        errors=field_errors(exc),
    )


def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure while handling %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        STORAGE_FAILURE,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(BusinessRuleViolationError, business_rule_violation_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
