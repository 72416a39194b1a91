# src/wifi_connect/services/__init__.py
"""Business logic services for the WiFi Connect application."""

from .errors import NotFoundError, PersistenceError, ValidationError, WifiConnectError
from .admin import AdminService
from .connection import ConnectionResult, ConnectionService, generate_mac_address
from .export import ExportService
from .pin import PinGate
from .statistics import ConnectionStatistics, RecentConnection, StatisticsService

__all__ = [
    "AdminService",
    "ConnectionResult", "ConnectionService", "generate_mac_address",
    "ConnectionStatistics", "RecentConnection", "StatisticsService",
    "ExportService",
    "PinGate",
    "WifiConnectError", "ValidationError", "PersistenceError", "NotFoundError",
]
