import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, prices, rates, swap
from .services.session import SwapSession, build_session


def create_app(
    settings_override: Settings | None = None, session: SwapSession | None = None
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    session: pre-built price store + form (tests inject one with a fake feed).
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)
    session = session or build_session(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.fetch_on_startup:
            # failures land in the store's error state, never abort startup
            await session.store.refresh()
        logging.getLogger("currency_swap").info(
            "startup complete", extra={"prices_status": session.store.status}
        )
        yield

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version, lifespan=lifespan
    )
    app.state.settings = settings
    app.state.session = session

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.CurrencyNotFoundError, errors.currency_not_found_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(prices.router)
    app.include_router(rates.router)
    app.include_router(swap.router)

    @app.get("/")
    async def root():
        return {"message": "Currency Swap API", "version": settings.version}

    return app


app = create_app()
