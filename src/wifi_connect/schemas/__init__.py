# src/wifi_connect/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

Field names follow the camelCase JSON contract the connect page depends on.
"""

from .common import ErrorResponse, MessageResponse
from .connection import ConnectRequest, ConnectResponse, WifiInfo
from .pin import PinVerifyRequest, PinVerifyResponse
from .statistics import (
    ExportResponse,
    RecentConnectionItem,
    StatisticsPayload,
    StatisticsResponse,
)

__all__ = [
    "ErrorResponse", "MessageResponse",
    "ConnectRequest", "ConnectResponse", "WifiInfo",
    "PinVerifyRequest", "PinVerifyResponse",
    "ExportResponse", "RecentConnectionItem", "StatisticsPayload", "StatisticsResponse",
]
