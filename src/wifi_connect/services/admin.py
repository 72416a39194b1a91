"""Administrative operations on the connection history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wifi_connect.repositories.connection_repo import ConnectionRepository

logger = logging.getLogger(__name__)


class AdminService:
    """Bulk maintenance of stored records."""

    def __init__(self, store: ConnectionRepository) -> None:
        self.store = store

    def clear_all(self) -> int:
        """Delete every connection record and return how many were removed.

        Irreversible; any confirmation step belongs to the caller.
        """
        deleted = self.store.delete_all()
        logger.warning("Cleared %d connection records", deleted)
        return deleted
