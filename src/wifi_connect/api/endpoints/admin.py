"""Administrative endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wifi_connect.api.dependencies import AdminServiceDep, failure_response
from wifi_connect.schemas.common import MessageResponse
from wifi_connect.services.errors import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


@router.delete("/clear", response_model=MessageResponse)
async def clear_connections(service: AdminServiceDep) -> MessageResponse | JSONResponse:
    """Delete every stored connection record.

    Unauthenticated and irreversible; the page asks for confirmation first.
    """
    try:
        service.clear_all()
    except PersistenceError as exc:
        logger.error("Database error while clearing data: %s", exc, exc_info=True)
        return failure_response("Failed to clear data")
    return MessageResponse(message="All data cleared successfully")
