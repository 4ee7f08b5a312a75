"""Error types and the JSON error responses they map to."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """A database call failed; rendered as HTTP 500 with ``{"message": ...}``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@contextmanager
def persistence_errors(fallback: str) -> Iterator[None]:
    """Turn any SQLAlchemyError raised in the block into a PersistenceError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Database call failed: %s", fallback)
        raise PersistenceError(str(getattr(exc, "orig", None) or exc) or fallback) from exc


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
