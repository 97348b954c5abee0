"""
Payroll Keeper - FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src import __version__
from src.config import Settings, configure_logging, settings as default_settings
from src.database import RecordStore
from src.exceptions import AuthError, PayrollError
from src.routers import employees, health, payrolls, payslips

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: create the data file if needed and make sure it parses.
    A corrupt data file aborts startup.
    """
    app_settings: Settings = app.state.settings
    store: RecordStore = app.state.store

    logger.info(f"Starting {app_settings.APP_NAME}...")
    logger.info(f"Environment: {app_settings.APP_ENV}")
    logger.info(f"Data file: {store.path}")
    if app_settings.uses_default_admin_key:
        logger.warning("ADMIN_KEY is not set; using the default development key")
    else:
        logger.info("Admin API key configured: Yes")

    store.ensure_initialized()
    store.load()

    yield

    logger.info(f"Shutting down {app_settings.APP_NAME}...")


async def payroll_error_handler(request: Request, exc: PayrollError) -> JSONResponse:
    """Map domain errors to their HTTP status with an ``{"error": ...}`` body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP errors with the same error body."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Endpoint not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or path parameters are client errors."""
    errors = exc.errors()
    if errors:
        error = errors[0]
        field = ".".join(str(loc) for loc in error.get("loc", ()))
        message = f"Invalid request: {field}: {error.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-loaded defaults
        store: Record store to use instead of one on ``settings.DATA_FILE``
    """
    app_settings = settings or default_settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Employee and payroll records kept in a single JSON document.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = store or RecordStore(app_settings.DATA_FILE)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PayrollError, payroll_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router)
    app.include_router(employees.router)
    app.include_router(payrolls.router)
    app.include_router(payslips.router)

    return app


def run() -> None:
    """Console entry point: configure logging and serve the API with uvicorn."""
    import uvicorn

    configure_logging(default_settings)
    uvicorn.run(
        "src.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_config=None,
    )


app = create_app()


if __name__ == "__main__":
    run()
