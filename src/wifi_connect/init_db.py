"""Create the WiFi Connect tables in the configured database."""

from wifi_connect.core.settings import settings
from wifi_connect.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print(f"Database initialized at {settings.database_url}.")
