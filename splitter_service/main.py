"""FastAPI app entry: config, logging, health and routes."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from splitter_service.config.logging import configure_logging, get_logger
from splitter_service.config.settings import get_settings
from splitter_service.config.splitting.static import get_active_splitter_profile, load_splitter_profiles
from splitter_service.controllers.routes.profiles import router as profiles_router
from splitter_service.controllers.routes.split import router as split_router
from splitter_service.services.splitting.base import SplitterConfigError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and profile validation. Fails fast on a broken static.json."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    profiles = load_splitter_profiles()
    get_active_splitter_profile()
    logger.info("Splitter profiles loaded", extra={"profiles": sorted(profiles)})
    yield
    logger.info("Shutdown complete")


app = FastAPI(
    title="Text Splitter Service",
    description="Split documents into size-bounded, overlapping chunks",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(split_router)
app.include_router(profiles_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(SplitterConfigError)
async def splitter_config_error_handler(_request: Request, exc: SplitterConfigError):
    logger.warning("Invalid splitter configuration", extra={"field": exc.field, "error": str(exc)})
    return JSONResponse(content={"detail": str(exc), "field": exc.field}, status_code=422)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details leak to the client."""
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )
