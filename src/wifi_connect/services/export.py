"""CSV export of the connection history."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Final

from wifi_connect.db.time import format_timestamp

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wifi_connect.repositories.connection_repo import ConnectionRepository

CSV_HEADER: Final[str] = "Device Name,Connection Time,Status"


class ExportService:
    """Serialize stored connection records to CSV text."""

    def __init__(self, store: ConnectionRepository) -> None:
        self.store = store

    def export_csv(self) -> str:
        """Return the header row plus one fully quoted row per record, newest first."""
        buffer = io.StringIO()
        buffer.write(CSV_HEADER + "\n")
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for record in self.store.list_all():
            writer.writerow(
                [record.device_name, format_timestamp(record.connected_at), record.status]
            )
        return buffer.getvalue()
