# tests/conftest.py
from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CONNECT_DELAY_SECONDS"] = "0"
os.environ["WIFI_SSID"] = "Elevate_2Ghz"
os.environ["WIFI_SECURITY"] = "WPA3"
os.environ["ADMIN_PIN"] = "1234"

from wifi_connect.core.settings import Settings  # noqa: E402
from wifi_connect.db.session import Base  # noqa: E402
from wifi_connect.db.session import get_db as app_get_session  # noqa: E402
from wifi_connect.main import app as fastapi_app  # noqa: E402
from wifi_connect.models import ConnectionRecord  # noqa: E402
from wifi_connect.repositories.connection_repo import ConnectionRepository  # noqa: E402

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(db_session: Session) -> ConnectionRepository:
    """Record store bound to the per-test in-memory database."""
    return ConnectionRepository(db_session)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide a Settings instance aligned with runtime configuration."""
    return Settings()


@pytest.fixture()
def make_record(store: ConnectionRepository) -> Callable[..., ConnectionRecord]:
    """Return a factory persisting records without the connection service."""

    def _make(device_name: str, *, device_id: str | None = None) -> ConnectionRecord:
        return store.insert(
            device_id=device_id or str(uuid.uuid4()),
            device_name=device_name,
            mac_address="AA:BB:CC:DD:EE:FF",
            ip_address="127.0.0.1",
        )

    return _make
