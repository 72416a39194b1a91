"""SQLAlchemy model for simulated WiFi connection events."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wifi_connect.db.session import Base
from wifi_connect.db.time import localnow

# The only status ever written; no transitions exist.
CONNECTION_STATUS_CONNECTED = "connected"


class ConnectionRecord(Base):
    """One logged fake-WiFi-association event.

    Rows are immutable once written: they are inserted by the connection
    service and only ever removed in bulk.
    """

    __tablename__ = "connections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    device_id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    device_name: Mapped[str] = mapped_column(Text, nullable=False)
    # Cosmetic XX:XX:XX:XX:XX:XX string, not a real hardware address.
    mac_address: Mapped[str] = mapped_column(String(17), nullable=False)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    connected_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=localnow)
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=CONNECTION_STATUS_CONNECTED,
    )

    def __repr__(self) -> str:
        return f"<ConnectionRecord {self.device_name} ({self.device_id}) at {self.connected_at}>"
