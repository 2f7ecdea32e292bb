import time
import uuid
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from planboard.api.main import api_router
from planboard.application import PlanningBoard
from planboard.core.config import Settings, settings
from planboard.core.observability import (
    get_logger,
    set_correlation_id,
    set_planner_id,
    setup_structured_logging,
)
from planboard.domain.scheduling.repositories import UnitRegistry
from planboard.infrastructure.registry import (
    InMemoryUnitRegistry,
    sample_units,
    sample_workers,
)

# Initialize structured logger
logger = get_logger(__name__)


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Middleware for request correlation and timing logs."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        # Generate correlation ID for request tracing
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        set_correlation_id(correlation_id)

        planner_id = request.headers.get("X-Planner-ID", "")
        if planner_id:
            set_planner_id(planner_id)

        start_time = time.time()
        method = request.method
        path = request.url.path

        logger.info("Request started", method=method, path=path)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                method=method,
                path=path,
                duration_seconds=time.time() - start_time,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id
        logger.info(
            "Request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=time.time() - start_time,
        )
        return response


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(
        "Application started",
        project_name=app.state.settings.PROJECT_NAME,
        environment=app.state.settings.ENVIRONMENT,
        units=len(app.state.board_registry.list_units()),
    )
    yield
    logger.info("Application shutdown")


def create_app(
    registry: UnitRegistry | None = None,
    app_settings: Settings | None = None,
    board: PlanningBoard | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        registry: Unit registry to serve; a demo registry when omitted
        app_settings: Settings override, the module settings when omitted
        board: Prebuilt planner session, built from the registry when omitted
    """
    app_settings = app_settings or settings
    setup_structured_logging(app_settings)

    if registry is None:
        registry = InMemoryUnitRegistry(
            units=sample_units(date.today()), workers=sample_workers()
        )

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        openapi_url=f"{app_settings.API_V1_STR}/openapi.json",
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.board_registry = registry
    app.state.board = board or PlanningBoard(registry, settings=app_settings)

    app.add_middleware(ObservabilityMiddleware)
    app.include_router(api_router, prefix=app_settings.API_V1_STR)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies without echoing the offending input."""
        logger.warning(
            "Request validation failed", path=request.url.path, errors=len(exc.errors())
        )
        # Raw input may hold NaN or Infinity, which strict JSON cannot encode
        detail = [
            {key: value for key, value in error.items() if key not in ("input", "ctx")}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(detail)})

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
