"""
Domain exceptions and the handlers that turn them into JSON responses.

Every error body has the shape ``{"message": "..."}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class PokedexError(Exception):
    """Base exception; carries the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConflictError(PokedexError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(PokedexError):
    status_code = status.HTTP_401_UNAUTHORIZED


class BadRequestError(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(PokedexError):
    """Third-party API failure other than a 404."""


async def pokedex_error_handler(request: Request, exc: PokedexError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework errors (unknown route, wrong method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PokedexError, pokedex_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
