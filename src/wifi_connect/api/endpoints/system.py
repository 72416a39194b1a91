"""System endpoints: public configuration, PIN check and health."""

from __future__ import annotations

import time

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from wifi_connect.api.dependencies import PinGateDep, SessionDep
from wifi_connect.core.settings import settings
from wifi_connect.schemas.pin import PinVerifyRequest, PinVerifyResponse

router = APIRouter(tags=["system"])


@router.get("/config")
async def get_public_config() -> dict[str, object]:
    """Return the network details and PIN length the page needs.

    The PIN itself is never exposed.
    """
    return {
        "success": True,
        "wifi": {
            "ssid": settings.wifi_ssid,
            "security": settings.wifi_security,
        },
        "pinLength": settings.pin_length,
    }


@router.post("/pin/verify", response_model=PinVerifyResponse)
async def verify_pin(payload: PinVerifyRequest, gate: PinGateDep) -> PinVerifyResponse:
    """Check a code typed on the statistics PIN pad."""
    return PinVerifyResponse(valid=gate.verify(payload.pin))


@router.get("/health")
async def get_system_health(db: SessionDep) -> dict[str, object]:
    """Health check including a database round trip.

    Args:
        db: Database session

    Returns:
        Dictionary with overall status, component health and version info
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "timestamp": int(time.time()),
        "components": {
            "database": db_status,
        },
        "version": settings.app_version,
    }
