"""Exception handlers mapping failures to JSON error bodies.

- request validation errors → 400
- ``RecordNotFoundError`` → 404
- ``InvalidActionError`` → 400
- anything unhandled → 500
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from codecraft.api.schemas.common import ErrorResponse
from codecraft.models import InvalidActionError, RecordNotFoundError

logger = logging.getLogger(__name__)


def _body(detail: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return ErrorResponse(detail=detail, errors=errors).model_dump(exclude_none=True)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request to %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_body(
            "Invalid request data",
            errors=[
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in exc.errors()
            ],
        ),
    )


async def _not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_body(str(exc)))


async def _invalid_action_handler(request: Request, exc: InvalidActionError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_body(str(exc)))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_body("Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(RecordNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidActionError, _invalid_action_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
