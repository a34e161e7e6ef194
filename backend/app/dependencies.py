from __future__ import annotations

from fastapi import Request

from requirements_report.models import ReportSettings

from .storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_report_settings(request: Request) -> ReportSettings:
    return request.app.state.report_settings
