"""Statistics and export endpoints for the operator view."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wifi_connect.api.dependencies import (
    ExportServiceDep,
    StatisticsServiceDep,
    failure_response,
)
from wifi_connect.schemas.statistics import (
    ExportResponse,
    RecentConnectionItem,
    StatisticsPayload,
    StatisticsResponse,
)
from wifi_connect.services.errors import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["statistics"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(service: StatisticsServiceDep) -> StatisticsResponse | JSONResponse:
    """Return connection totals and the most recent connections."""
    try:
        stats = service.get_statistics()
    except PersistenceError as exc:
        logger.error("Database error while fetching statistics: %s", exc, exc_info=True)
        return failure_response("Failed to fetch statistics")

    return StatisticsResponse(
        statistics=StatisticsPayload(
            total_connections=stats.total_connections,
            today_connections=stats.today_connections,
            unique_devices=stats.unique_devices,
            recent_connections=[
                RecentConnectionItem(device_name=item.device_name, timestamp=item.timestamp)
                for item in stats.recent_connections
            ],
        )
    )


@router.get("/export", response_model=ExportResponse)
async def export_connections(service: ExportServiceDep) -> ExportResponse | JSONResponse:
    """Return the full connection history as CSV text."""
    try:
        csv_data = service.export_csv()
    except PersistenceError as exc:
        logger.error("Database error while exporting data: %s", exc, exc_info=True)
        return failure_response("Failed to export data")
    return ExportResponse(csv_data=csv_data)
