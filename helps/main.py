"""
Application entry point.

Creates the FastAPI application and wires together:
- Routes
- Error reporter and error handlers
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from helps.core.config import Settings, settings as default_settings
from helps.interfaces.routes import register_routes
from helps.shared.errors import ErrorReporter
from helps.shared.errors.handlers import register_error_handlers
from helps.shared.logging import configure_logging, get_logger
from helps.shared.security.headers import SecurityHeadersMiddleware
from helps.shared.security.rate_limiting import build_limiter


def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The logger is built
    once here and handed to the error reporter.

    Args:
        settings: Application settings. Defaults to the environment.
        logger: Logger for error reports. When omitted, process logging
            is configured and the application logger is used.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    if logger is None:
        configure_logging(level=settings.log_level)
        logger = get_logger()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # --- Error Reporting ---
    app.state.error_reporter = ErrorReporter(
        logger=logger, header=settings.error_id_header
    )
    register_error_handlers(app)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Routes ---
    register_routes(app)

    return app


app = create_app()
