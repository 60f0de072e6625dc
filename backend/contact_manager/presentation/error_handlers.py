"""Maps domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from contact_manager.domain.exceptions import (
    ContactValidationError,
    EntityNotFoundError,
    MalformedInputError,
)

logger = logging.getLogger(__name__)


def _error_body(message: str) -> dict:
    return {"status": "error", "message": message}


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's exception → response mapping on ``app``."""

    @app.exception_handler(EntityNotFoundError)
    async def _not_found(_: Request, exc: EntityNotFoundError) -> JSONResponse:
        logger.warning("Not found: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_body(str(exc)),
        )

    @app.exception_handler(ContactValidationError)
    async def _validation(_: Request, exc: ContactValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=[{"field": v.field, "message": v.message} for v in exc.violations],
        )

    @app.exception_handler(MalformedInputError)
    async def _malformed(_: Request, exc: MalformedInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(str(exc)),
        )

    # Request validation (FastAPI/Pydantic) -> flattened 422 payload
    @app.exception_handler(RequestValidationError)
    async def _request_validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        errors = []
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            errors.append(
                {
                    "field": field,
                    "message": error["msg"],
                    "type": error["type"],
                }
            )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"status": "error", "message": "Request validation failed", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("An unexpected error occurred."),
        )
