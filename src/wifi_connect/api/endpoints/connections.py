"""Connect endpoint for the WiFi Connect API."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wifi_connect.api.dependencies import (
    ClientAddressDep,
    ConnectionServiceDep,
    failure_response,
)
from wifi_connect.schemas.connection import ConnectRequest, ConnectResponse, WifiInfo
from wifi_connect.services.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["connections"])


@router.post(
    "/connect",
    response_model=ConnectResponse,
    responses={500: {"description": "Connection could not be recorded"}},
)
async def connect(
    payload: ConnectRequest,
    service: ConnectionServiceDep,
    address: ClientAddressDep,
) -> ConnectResponse | JSONResponse:
    """Simulate joining the WiFi network and record the connection.

    Args:
        payload: Device metadata detected by the page
        service: Connection service bound to the request's store
        address: Caller's observed network address

    Returns:
        The generated device id and the static network details, or a
        generic 500 failure
    """
    logger.debug(
        "Connect metadata: platform=%s language=%s screen=%s timezone=%s agent=%s",
        payload.platform,
        payload.language,
        payload.screen_resolution,
        payload.timezone,
        payload.user_agent,
    )
    try:
        result = await service.connect(payload.device_name, address)
    except ValidationError as exc:
        logger.warning("Rejected connect request: %s", exc)
        return failure_response("Connection failed")
    except PersistenceError as exc:
        logger.error("Database error while recording connection: %s", exc, exc_info=True)
        return failure_response("Failed to record connection")
    except Exception:
        logger.exception("Connection error")
        return failure_response("Connection failed")

    return ConnectResponse(
        device_id=result.device_id,
        message=f"Successfully connected to {result.ssid}",
        wifi_info=WifiInfo(ssid=result.ssid, status=result.status, security=result.security),
    )
