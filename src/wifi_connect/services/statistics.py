"""Aggregate connection statistics for the operator view."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from wifi_connect.db.time import format_timestamp

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wifi_connect.repositories.connection_repo import ConnectionRepository

RECENT_CONNECTIONS_LIMIT = 20


@dataclass(frozen=True)
class RecentConnection:
    """A recent record projected for display."""

    device_name: str
    timestamp: str


@dataclass(frozen=True)
class ConnectionStatistics:
    """Counts and recent activity derived from one table scan."""

    total_connections: int = 0
    today_connections: int = 0
    unique_devices: int = 0
    recent_connections: list[RecentConnection] = field(default_factory=list)


class StatisticsService:
    """Compute statistics over every stored connection record.

    No counters are maintained incrementally; each call reads the full table.
    """

    def __init__(
        self,
        store: ConnectionRepository,
        *,
        recent_limit: int = RECENT_CONNECTIONS_LIMIT,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.store = store
        self.recent_limit = recent_limit
        self._today = clock or date.today

    def get_statistics(self) -> ConnectionStatistics:
        """Return totals, today's count, distinct names and the latest records.

        Raises:
            PersistenceError: If the store cannot be read.
        """
        records = self.store.list_all()
        today = self._today()
        return ConnectionStatistics(
            total_connections=len(records),
            today_connections=sum(
                1 for record in records if record.connected_at.date() == today
            ),
            # Distinct display names, not device ids.
            unique_devices=len({record.device_name for record in records}),
            recent_connections=[
                RecentConnection(
                    device_name=record.device_name,
                    timestamp=format_timestamp(record.connected_at),
                )
                for record in records[: self.recent_limit]
            ],
        )
