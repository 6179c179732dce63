"""Domain exceptions and the FastAPI handlers that render them.

Feed and conversion failures never crash the service: the form controller
turns conversion errors into a display message, the price store turns feed
errors into its error state, and anything that still reaches the HTTP layer is
mapped to a JSON error body here.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("currency_swap.errors")


class SwapServiceError(Exception):
    """Base class for currency swap domain errors."""


class NetworkError(SwapServiceError):
    """Price feed fetch failed (transport, non-2xx status or malformed body)."""


class CurrencyNotFoundError(SwapServiceError):
    """A symbol is missing from the price set or has an unusable price."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Token not found: {symbol}")


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        detail = f"No route for {request.method} {request.url.path}"
        error = "not_found"
    else:
        detail = exc.detail
        error = "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "detail": detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": exc.errors(),
        },
    )


def currency_not_found_handler(request: Request, exc: CurrencyNotFoundError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "currency_not_found",
            "detail": str(exc),
            "currency": exc.symbol,
        },
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
