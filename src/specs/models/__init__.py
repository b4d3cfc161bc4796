from __future__ import annotations

from typing import Dict, Type

from pydantic import BaseModel

from .http import (
    ScheduleCreateRequest,
    PublishInstagramRequest,
    ExportEmailRequest,
    HealthResponse,
    ErrorResponse,
)
from .domain import (
    Design,
    ScheduleSpec,
    Schedule,
    HistoryRecord,
    ExportDescriptor,
    DesignsDocument,
    SchedulesDocument,
    HistoryDocument,
    DashboardStats,
    Dashboard,
    MonthlySales,
    SalesTrends,
)


# Registry mapping output schema filenames to models for generation
SCHEMA_MODELS: Dict[str, Type[BaseModel]] = {
    "design.schema.json": Design,
    "schedule.schema.json": Schedule,
    "history.record.schema.json": HistoryRecord,
    "export.descriptor.schema.json": ExportDescriptor,
    "designs.document.schema.json": DesignsDocument,
    "schedules.document.schema.json": SchedulesDocument,
    "history.document.schema.json": HistoryDocument,
    "dashboard.schema.json": Dashboard,
    "sales.trends.schema.json": SalesTrends,
    "schedule.create.request.schema.json": ScheduleCreateRequest,
    "publish.instagram.request.schema.json": PublishInstagramRequest,
    "export.email.request.schema.json": ExportEmailRequest,
    "health.response.schema.json": HealthResponse,
    "error.response.schema.json": ErrorResponse,
}

__all__ = [
    "ScheduleCreateRequest",
    "PublishInstagramRequest",
    "ExportEmailRequest",
    "HealthResponse",
    "ErrorResponse",
    "Design",
    "ScheduleSpec",
    "Schedule",
    "HistoryRecord",
    "ExportDescriptor",
    "DesignsDocument",
    "SchedulesDocument",
    "HistoryDocument",
    "DashboardStats",
    "Dashboard",
    "MonthlySales",
    "SalesTrends",
    "SCHEMA_MODELS",
]
