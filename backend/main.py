from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from requirements_report.data_sources import load_report_settings
from requirements_report.logging_utils import setup_logging

from backend.app.config import Settings, get_settings
from backend.app.routers import health, projects
from backend.app.storage import MemStorage


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None, storage: MemStorage | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
    )
    app.state.storage = storage or MemStorage()
    report_settings = load_report_settings(settings.report_config_path)
    report_settings.charts_enabled = report_settings.charts_enabled and settings.charts_enabled
    app.state.report_settings = report_settings

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(health.router)
    app.include_router(projects.router)
    return app


app = create_app()
