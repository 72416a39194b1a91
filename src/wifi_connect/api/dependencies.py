"""Dependency providers wiring services to a per-request store handle."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from wifi_connect.core.settings import settings
from wifi_connect.db.session import get_db
from wifi_connect.repositories.connection_repo import ConnectionRepository
from wifi_connect.schemas.common import ErrorResponse
from wifi_connect.services import (
    AdminService,
    ConnectionService,
    ExportService,
    PinGate,
    StatisticsService,
)

SessionDep = Annotated[Session, Depends(get_db)]

HTTP_INTERNAL_SERVER_ERROR = 500


def get_connection_store(db: SessionDep) -> ConnectionRepository:
    """Return the record store bound to the request's session."""
    return ConnectionRepository(db)


StoreDep = Annotated[ConnectionRepository, Depends(get_connection_store)]


def get_connection_service(store: StoreDep) -> ConnectionService:
    """Build the connection service from the configured network details."""
    return ConnectionService(
        store,
        ssid=settings.wifi_ssid,
        security=settings.wifi_security,
        delay_seconds=settings.connect_delay_seconds,
    )


def get_statistics_service(store: StoreDep) -> StatisticsService:
    """Build the statistics service."""
    return StatisticsService(store, recent_limit=settings.recent_connections_limit)


def get_export_service(store: StoreDep) -> ExportService:
    """Build the CSV export service."""
    return ExportService(store)


def get_admin_service(store: StoreDep) -> AdminService:
    """Build the admin service."""
    return AdminService(store)


def get_pin_gate() -> PinGate:
    """Return a PIN gate for the configured statistics PIN."""
    return PinGate(settings.admin_pin)


def client_address(request: Request) -> str | None:
    """Return the caller's observed network address.

    The first ``X-Forwarded-For`` hop is used only when the deployment says
    it sits behind a trusted proxy.
    """
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else None


def failure_response(message: str) -> JSONResponse:
    """Return the generic ``{success: false, message}`` 500 response."""
    return JSONResponse(
        status_code=HTTP_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message=message).model_dump(),
    )


ConnectionServiceDep = Annotated[ConnectionService, Depends(get_connection_service)]
StatisticsServiceDep = Annotated[StatisticsService, Depends(get_statistics_service)]
ExportServiceDep = Annotated[ExportService, Depends(get_export_service)]
AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
PinGateDep = Annotated[PinGate, Depends(get_pin_gate)]
ClientAddressDep = Annotated[str | None, Depends(client_address)]
