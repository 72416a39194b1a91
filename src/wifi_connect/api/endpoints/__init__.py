# src/wifi_connect/api/endpoints/__init__.py
"""API endpoint modules."""

from .admin import router as admin_router
from .connections import router as connections_router
from .statistics import router as statistics_router
from .system import router as system_router

__all__ = [
    "admin_router",
    "connections_router",
    "statistics_router",
    "system_router",
]
