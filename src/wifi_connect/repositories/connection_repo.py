"""Data access helpers for working with connection records."""
from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wifi_connect.models.connection import CONNECTION_STATUS_CONNECTED, ConnectionRecord
from wifi_connect.services.errors import PersistenceError

__all__ = ["ConnectionRepository"]

logger = logging.getLogger(__name__)


class ConnectionRepository:
    """Append-only store of connection records.

    There is deliberately no update method: records are inserted once and
    removed only through :meth:`delete_all`.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def insert(
        self,
        *,
        device_id: str,
        device_name: str,
        mac_address: str,
        ip_address: str | None,
        status: str = CONNECTION_STATUS_CONNECTED,
    ) -> ConnectionRecord:
        """Persist a new connection record and return it with its id assigned.

        Raises:
            PersistenceError: If the device id already exists or the store
                rejects the write.
        """
        record = ConnectionRecord(
            device_id=device_id,
            device_name=device_name,
            mac_address=mac_address,
            ip_address=ip_address,
            status=status,
        )
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise PersistenceError(f"device id {device_id} already recorded") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError("failed to insert connection record") from exc
        # Expired attributes reload lazily; the row is already committed here.
        return record

    def list_all(self) -> list[ConnectionRecord]:
        """Return every record, most recent first."""
        stmt = select(ConnectionRecord).order_by(
            ConnectionRecord.connected_at.desc(),
            ConnectionRecord.id.desc(),
        )
        try:
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as exc:
            raise PersistenceError("failed to list connection records") from exc

    def count(self) -> int:
        """Return the number of stored records."""
        try:
            return int(self.session.scalar(select(func.count(ConnectionRecord.id))) or 0)
        except SQLAlchemyError as exc:
            raise PersistenceError("failed to count connection records") from exc

    def delete_all(self) -> int:
        """Remove every record and return how many were deleted."""
        try:
            result = self.session.execute(delete(ConnectionRecord))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError("failed to clear connection records") from exc
        deleted = int(result.rowcount or 0)
        logger.debug("Deleted %d connection records", deleted)
        return deleted
