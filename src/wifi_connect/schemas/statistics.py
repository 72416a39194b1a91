"""Statistics and export response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RecentConnectionItem(BaseModel):
    """One entry of the recent activity list."""

    device_name: str = Field(..., alias="deviceName")
    timestamp: str

    model_config = ConfigDict(populate_by_name=True)


class StatisticsPayload(BaseModel):
    """Aggregate connection counts."""

    total_connections: int = Field(..., alias="totalConnections")
    today_connections: int = Field(..., alias="todayConnections")
    unique_devices: int = Field(..., alias="uniqueDevices")
    recent_connections: list[RecentConnectionItem] = Field(
        default_factory=list,
        alias="recentConnections",
    )

    model_config = ConfigDict(populate_by_name=True)


class StatisticsResponse(BaseModel):
    """Envelope for ``GET /api/statistics``."""

    success: bool = True
    statistics: StatisticsPayload


class ExportResponse(BaseModel):
    """Envelope for ``GET /api/export``."""

    success: bool = True
    csv_data: str = Field(..., alias="csvData")

    model_config = ConfigDict(populate_by_name=True)
