# ua_classifier/main.py

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from apscheduler.schedulers.background import BackgroundScheduler
from ua_classifier.config import Settings, settings as default_settings
from ua_classifier.api import router as api_router
from ua_classifier.errors import ClassificationError, InputError, MethodNotAllowedError
from ua_classifier.reporter import report_stats
from ua_classifier.service import ClassificationService
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HTTP_ERROR_KINDS = {404: "not_found", 405: MethodNotAllowedError.kind}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    # Startup
    logger.info("Starting UA Classifier API...")

    service: ClassificationService = app.state.service
    interval = service.settings.stats_interval_seconds
    scheduler = None

    if interval > 0:
        scheduler = BackgroundScheduler()
        scheduler.add_job(
            report_stats,
            trigger="interval",
            seconds=interval,
            args=[service],
            id="stats_report",
            replace_existing=True,
        )
        scheduler.start()
        logger.info(f"Stats report scheduled every {interval}s")

    logger.info(
        f"UA Classifier API ready - cache capacity {service.cache.capacity}, "
        f"parse timeout {service.settings.parse_timeout_ms} ms"
    )

    yield

    # Shutdown
    logger.info("Shutting down...")

    if scheduler is not None:
        scheduler.shutdown(wait=True)
        logger.info("Scheduler stopped")

    # Final report before exit
    report_stats(service)


async def classification_error_handler(request: Request, exc: ClassificationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = "Invalid or missing ua_string"
    if errors:
        detail = f"{detail}: {errors[0].get('msg', '')}"
    request.app.state.service.stats.record_failure(InputError.kind)
    return JSONResponse(status_code=InputError.status_code, content=InputError(detail).to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    kind = HTTP_ERROR_KINDS.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": kind, "detail": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[ClassificationService] = None,
) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="UA Classifier API",
        description="Classifies User-Agent strings into browser, OS, device, engine and bot attributes",
        version=settings.parser_version,
        lifespan=lifespan,
    )

    # Owned by the app, shared by all requests
    app.state.service = service or ClassificationService(settings)

    app.add_exception_handler(ClassificationError, classification_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Register routes
    app.include_router(api_router)

    return app


app = create_app()
