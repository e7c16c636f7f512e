import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException

from datayoinker.application.api.v1.errors import error_body, map_error
from datayoinker.application.api.v1.routes import hapi, pages, rest
from datayoinker.application.di import create_container
from datayoinker.config import Config, configure_logging
from datayoinker.domain.shared.error import DataYoinkerError
from datayoinker.infrastructure.persistence.schema import ensure_schema
from datayoinker.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container

    # Storage must be usable before serving; any failure here aborts startup
    engine = await container.get(AsyncEngine)
    await ensure_schema(engine)

    yield

    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Trace HTTP requests; spans are only exported when a Logfire token is present
    logfire.configure(
        service_name=config.server.name,
        service_version=config.server.version,
        send_to_logfire="if-token-present",
        console=False,
    )
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(pages.router)
    app_instance.include_router(hapi.router)
    app_instance.include_router(rest.router)

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(DataYoinkerError)
    async def datayoinker_error_handler(request: Request, exc: DataYoinkerError):
        response = map_error(exc)
        if response.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return response

    # Framework errors (unknown route, unparseable form body) keep the same body shape
    @app_instance.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        status = exc.status_code
        return JSONResponse(
            status_code=status,
            content=error_body(str(exc.detail), HTTPStatus(status).phrase, status),
            headers=exc.headers,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content=error_body(str(exc), "Internal Server Error", 500),
        )

    return app_instance
