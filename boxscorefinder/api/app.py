"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from boxscorefinder.api.dependencies import close_search_service
from boxscorefinder.api.models import SearchRequest
from boxscorefinder.api.routes import health, search
from boxscorefinder.config import APP_DESCRIPTION, APP_NAME, VERSION
from boxscorefinder.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info(f"Starting {APP_NAME} {VERSION}")

    yield

    logger.info(f"Shutting down {APP_NAME}...")
    close_search_service()


def _field_alias(name: str) -> str:
    """Wire name of a request field; defaults are reported under the Python name."""
    field = SearchRequest.model_fields.get(name)
    if field is not None and field.alias:
        return field.alias
    return name


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with messages grouped by field (camelCase field names)."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = _field_alias(loc[-1]) if loc else "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    logger.debug(f"Rejected {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid search query", "errors": errors},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=f"{APP_NAME} API",
        description=APP_DESCRIPTION,
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(search.router, prefix="/api", tags=["Search"])

    return app


app = create_app()
