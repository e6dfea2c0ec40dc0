"""
Exception handlers producing the API error envelope.

Every error response has the shape::

    {"error": {"message": "<CODE>", "fields": {"<field>": "<CODE>"}}}

where ``fields`` is only present when the error concerns specific fields.
"""

from collections.abc import Sequence
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.common.exceptions import DomainError
from src.exceptions import PersistenceError, RecallError
from src.infrastructure.learning.schemas.validation_codes import (
    BODY_ERROR_CODES,
    BODY_INVALID_CODE,
    FIELD_ERROR_CODES,
    ITEM_INVALID_CODE,
    JSON_INVALID_TYPE,
)

logger = structlog.get_logger(__name__)

FIELD_VALIDATION_FAILED = "FIELD_VALIDATION_FAILED"
INVALID_JSON_BODY = "Invalid JSON body"
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

# Routes whose 400 message is the code of the first invalid field
FIRST_FIELD_CODE_ROUTES = frozenset({"create_generation_source"})


def error_response(
    status_code: int, message: str, fields: dict[str, str] | None = None
) -> JSONResponse:
    error: dict[str, Any] = {"message": message}
    if fields:
        error["fields"] = fields
    return JSONResponse(status_code=status_code, content={"error": error})


def _field_code(field: str, error_type: str) -> str:
    codes = FIELD_ERROR_CODES.get(field)
    if codes is None:
        return f"{field.upper()}_INVALID"
    return codes.get(error_type, codes["*"])


def validation_error_fields(errors: Sequence[Any]) -> dict[str, str]:
    """
    Translate pydantic/FastAPI validation errors into field error codes.

    Item errors are keyed by their path below the request part they come
    from ("inputText", "3.front"). An array item that is not an object is
    keyed by its index ("1"); errors about the body as a whole are keyed
    "body". The first error for a key wins.

    The result only depends on the errors, so validating the same input twice
    always gives the same answer.
    """
    fields: dict[str, str] = {}

    for error in errors:
        # The first element names the request part ("body", "path", "query")
        loc = list(error.get("loc", ()))[1:]
        error_type = error.get("type", "")

        field = next((part for part in loc if isinstance(part, str)), None)
        if field is None:
            # json_invalid carries the character offset, not an item index
            if loc and error_type != JSON_INVALID_TYPE:
                fields.setdefault(str(loc[0]), ITEM_INVALID_CODE)
            else:
                fields.setdefault("body", BODY_ERROR_CODES.get(error_type, BODY_INVALID_CODE))
            continue

        # Cut the path right after the field name (drops pydantic's
        # union/constraint suffixes)
        path = [str(part) for part in loc[: loc.index(field) + 1]]
        fields.setdefault(".".join(path), _field_code(field, error_type))

    return fields


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    fields = validation_error_fields(errors)
    logger.info("request_validation_failed", path=request.url.path, fields=fields)
    return error_response(
        status.HTTP_400_BAD_REQUEST, validation_error_message(request, errors, fields), fields
    )


def validation_error_message(
    request: Request, errors: Sequence[Any], fields: dict[str, str]
) -> str:
    if any(error.get("type") == JSON_INVALID_TYPE for error in errors):
        return INVALID_JSON_BODY

    route = request.scope.get("route")
    if fields and getattr(route, "name", None) in FIRST_FIELD_CODE_ROUTES:
        return next(iter(fields.values()))

    return FIELD_VALIDATION_FAILED


async def recall_error_handler(request: Request, exc: RecallError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "request_failed",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.detail if isinstance(exc, PersistenceError) else str(exc),
        )
    else:
        logger.info(
            "request_rejected", path=request.url.path, status_code=exc.status_code, error=str(exc)
        )
    return error_response(exc.status_code, exc.message, exc.fields)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("domain_rule_violated", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, FIELD_VALIDATION_FAILED)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error", path=request.url.path, error=str(exc), exc_info=exc
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on the application."""
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RecallError, recall_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
