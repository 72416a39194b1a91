"""HTTP API for the WiFi Connect application."""

from .endpoints import (
    admin_router,
    connections_router,
    statistics_router,
    system_router,
)

__all__ = [
    "admin_router",
    "connections_router",
    "statistics_router",
    "system_router",
]
