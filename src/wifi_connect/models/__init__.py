"""SQLAlchemy models for the WiFi Connect application."""

from .connection import CONNECTION_STATUS_CONNECTED, ConnectionRecord

__all__ = ["ConnectionRecord", "CONNECTION_STATUS_CONNECTED"]
