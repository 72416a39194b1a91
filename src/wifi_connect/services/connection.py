"""Simulated WiFi association for visiting devices.

Nothing here touches a radio. A connect call waits for a short, configurable
handshake delay, invents a MAC address and records the event.
"""

from __future__ import annotations

import asyncio
import logging
import random
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from wifi_connect.models.connection import CONNECTION_STATUS_CONNECTED
from wifi_connect.services.errors import ValidationError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wifi_connect.repositories.connection_repo import ConnectionRepository

logger = logging.getLogger(__name__)

HEX_DIGITS: Final[str] = "0123456789ABCDEF"
DEFAULT_DEVICE_NAME: Final[str] = "Unknown Device"


def generate_mac_address(rng: random.Random | None = None) -> str:
    """Return a random, uppercase ``XX:XX:XX:XX:XX:XX`` hardware-style address."""
    rng = rng or random
    return ":".join(
        rng.choice(HEX_DIGITS) + rng.choice(HEX_DIGITS)
        for _ in range(6)
    )


@dataclass(frozen=True)
class ConnectionResult:
    """Confirmation payload returned after a simulated association."""

    device_id: str
    device_name: str
    mac_address: str
    ssid: str
    security: str
    status: str = CONNECTION_STATUS_CONNECTED


class ConnectionService:
    """Validate connect requests and persist fabricated connection events."""

    def __init__(
        self,
        store: ConnectionRepository,
        *,
        ssid: str,
        security: str,
        delay_seconds: float = 1.5,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.ssid = ssid
        self.security = security
        self.delay_seconds = max(0.0, float(delay_seconds))
        self._rng = rng

    @staticmethod
    def normalize_device_name(device_name: str | None) -> str:
        """Return the display name to record, falling back to a placeholder.

        Raises:
            ValidationError: If the name is not a string.
        """
        if device_name is None:
            return DEFAULT_DEVICE_NAME
        if not isinstance(device_name, str):
            raise ValidationError("device name must be a string")
        name = device_name.strip()
        return name or DEFAULT_DEVICE_NAME

    async def connect(self, device_name: str | None, client_address: str | None) -> ConnectionResult:
        """Simulate joining the configured network and record the event.

        Args:
            device_name: Client supplied display name.
            client_address: Network address the request was observed from.

        Returns:
            The generated identifier together with the static network details.

        Raises:
            ValidationError: If the device name is malformed.
            PersistenceError: If the record could not be stored.
        """
        name = self.normalize_device_name(device_name)
        device_id = str(uuid.uuid4())
        mac_address = generate_mac_address(self._rng)

        logger.info("Device %s (%s) attempting to connect", name, device_id)

        # Association handshake; yields to the event loop.
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        self.store.insert(
            device_id=device_id,
            device_name=name,
            mac_address=mac_address,
            ip_address=client_address,
            status=CONNECTION_STATUS_CONNECTED,
        )

        logger.info("Device %s connected to %s", device_id, self.ssid)
        return ConnectionResult(
            device_id=device_id,
            device_name=name,
            mac_address=mac_address,
            ssid=self.ssid,
            security=self.security,
        )
