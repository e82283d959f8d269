"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from diet_planner.api.foods import foods_router, meals_router
from diet_planner.api.pdf import router as pdf_router
from diet_planner.api.profiles import plans_router, profiles_router
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.errors import (
    ConfigurationError,
    NotFoundError,
    ProfileValidationError,
    RenderingError,
)

SERVICE_NAME = "diet-planner"
_REQUEST_LOCATIONS = frozenset({"body", "query", "path"})


def _validation_response(errors: list[dict[str, str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Validation error", "errors": errors},
    )


def _field_name(location: tuple[object, ...]) -> str:
    parts = [str(part) for part in location if part not in _REQUEST_LOCATIONS]
    return ".".join(parts)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    debug_errors = container.settings.environment == "local"

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(profiles_router)
    app.include_router(plans_router)
    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(pdf_router)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _validation_response(
            [
                {"field": _field_name(tuple(error["loc"])), "message": error["msg"]}
                for error in exc.errors()
            ]
        )

    @app.exception_handler(ProfileValidationError)
    async def profile_validation_handler(
        request: Request, exc: ProfileValidationError
    ) -> JSONResponse:
        return _validation_response(exc.errors)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "message": str(exc)},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error(
            "Configuration error on %s", request.url.path, exc_info=exc
        )
        content: dict[str, object] = {"success": False, "message": "Server error"}
        if debug_errors:
            content["detail"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
        )

    @app.exception_handler(RenderingError)
    async def rendering_handler(request: Request, exc: RenderingError) -> JSONResponse:
        logger.error("PDF rendering failed on %s", request.url.path, exc_info=exc)
        content: dict[str, object] = {
            "success": False,
            "message": "PDF generation is temporarily unavailable",
        }
        if debug_errors:
            content["detail"] = str(exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content
        )

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Report uptime and store connectivity."""
        state_container: AppContainer = request.app.state.container
        health_service = state_container.health_service
        return {
            "status": "ok",
            "uptime_seconds": health_service.uptime_seconds(),
            "database": health_service.database_status(),
        }

    @app.get("/api/status")
    async def api_status(request: Request) -> dict[str, object]:
        """Report service name and version."""
        state_container: AppContainer = request.app.state.container
        return {
            "service": SERVICE_NAME,
            "version": state_container.settings.service_version,
            "environment": state_container.settings.environment,
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }

    return app
