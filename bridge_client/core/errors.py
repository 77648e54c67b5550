"""Error taxonomy and HTTP error handlers.

Quote failures (transport, malformed response, busy session) are values the
session hands back to its caller; they are never raised out of the quote
client. Input errors (unknown currency, invalid amount) are ValueErrors raised
by the request builder and mapped to 422 by the handlers below.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("bridge_client.errors")


class QuoteError(Exception):
    kind: str = "quote_error"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def as_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class TransportError(QuoteError):
    """Network failure, timeout, non-2xx status or an unparseable body."""

    kind = "transport_error"


class MalformedResponse(QuoteError):
    """Body parsed as JSON but does not have the expected shape."""

    kind = "malformed_response"


class Busy(QuoteError):
    kind = "busy"

    def __init__(self, message: str = "a quote request is already in flight"):
        super().__init__(message)


class InvalidAmount(ValueError):
    pass


class UnsupportedCurrency(ValueError):
    def __init__(self, code: str):
        super().__init__(f"unsupported currency '{code}'")
        self.code = code


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "http_error", "detail": exc.detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": exc.errors(),
        },
    )


def unsupported_currency_handler(request: Request, exc: UnsupportedCurrency):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "unsupported_currency", "detail": str(exc)},
    )


def invalid_amount_handler(request: Request, exc: InvalidAmount):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "invalid_amount", "detail": str(exc)},
    )


def busy_handler(request: Request, exc: Busy):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": "busy", "detail": exc.message},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
