"""Application settings and configuration.

This module defines all configuration options for the WiFi Connect application.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="WiFi Connect", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(
        default="sqlite:///./wifi_connections.db",
        alias="DATABASE_URL",
    )
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    # Create missing tables on startup; disable when Alembic manages the schema
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Advertised network; static, never derived from device state
    wifi_ssid: str = Field(default="Elevate_2Ghz", alias="WIFI_SSID")
    wifi_security: str = Field(default="WPA3", alias="WIFI_SECURITY")

    # Statistics view PIN (presentation gate, not authentication)
    admin_pin: str = Field(default="1234", pattern=r"^\d{4}$", alias="ADMIN_PIN")

    # Simulated association handshake
    connect_delay_seconds: float = Field(default=1.5, ge=0.0, alias="CONNECT_DELAY_SECONDS")
    recent_connections_limit: int = Field(default=20, ge=1, alias="RECENT_CONNECTIONS_LIMIT")

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    # Record the first X-Forwarded-For hop instead of the socket peer
    trust_forwarded_for: bool = Field(default=False, alias="TRUST_FORWARDED_FOR")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def pin_length(self) -> int:
        """Number of digits the statistics PIN pad expects."""
        return len(self.admin_pin)


settings = Settings()
