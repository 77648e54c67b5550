import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import currencies, session
from .services.quote_client import QuoteClient
from .services.session import QuoteSession


def create_app(
    settings_override: Settings | None = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    transport: optional httpx transport for the quote service (tests pass a
    MockTransport so nothing leaves the process).
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug)

    quote_client = QuoteClient(settings, transport=transport)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.getLogger("bridge_client").info(
            "quote service at %s", settings.quote_service_base_url
        )
        yield
        await quote_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.quote_session = QuoteSession(quote_client)

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.UnsupportedCurrency, errors.unsupported_currency_handler)
    app.add_exception_handler(errors.InvalidAmount, errors.invalid_amount_handler)
    app.add_exception_handler(errors.Busy, errors.busy_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(currencies.router)
    app.include_router(session.router)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
