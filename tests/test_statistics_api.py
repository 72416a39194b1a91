"""Tests for statistics, export and clear endpoints."""

from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from wifi_connect.api.dependencies import get_connection_store
from wifi_connect.services.errors import PersistenceError


class _UnavailableStore:
    def list_all(self):
        raise PersistenceError("unable to open database file")

    def delete_all(self):
        raise PersistenceError("unable to open database file")


def _connect(client: TestClient, name: str) -> dict:
    r = client.post("/api/connect", json={"deviceName": name})
    assert r.status_code == status.HTTP_200_OK
    return r.json()


def _statistics(client: TestClient) -> dict:
    r = client.get("/api/statistics")
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["success"] is True
    return body["statistics"]


def test_statistics_empty(client: TestClient) -> None:
    """A fresh store reports zeros."""
    assert _statistics(client) == {
        "totalConnections": 0,
        "todayConnections": 0,
        "uniqueDevices": 0,
        "recentConnections": [],
    }


def test_single_connect_scenario(client: TestClient) -> None:
    """Connecting a Pixel 7 shows up in the statistics."""
    _connect(client, "Pixel 7")
    stats = _statistics(client)
    assert stats["totalConnections"] == 1
    assert stats["todayConnections"] == 1
    assert stats["uniqueDevices"] == 1
    assert stats["recentConnections"][0]["deviceName"] == "Pixel 7"
    assert set(stats["recentConnections"][0]) == {"deviceName", "timestamp"}


def test_same_name_collapses_to_one_device(client: TestClient) -> None:
    """Two iPhones count twice but as one unique device."""
    first = _connect(client, "iPhone")
    second = _connect(client, "iPhone")
    assert first["deviceId"] != second["deviceId"]

    stats = _statistics(client)
    assert stats["totalConnections"] == 2
    assert stats["uniqueDevices"] == 1


def test_distinct_names_are_unique_devices(client: TestClient) -> None:
    """N distinct names give N unique devices."""
    names = ["iPhone", "iPad", "Android Device", "Mac", "Windows PC"]
    for name in names:
        _connect(client, name)
    assert _statistics(client)["uniqueDevices"] == len(names)


def test_recent_connections_capped_at_twenty(client: TestClient) -> None:
    """The recent list never exceeds twenty entries and is newest first."""
    for i in range(22):
        _connect(client, f"Phone {i}")
    recent = _statistics(client)["recentConnections"]
    assert len(recent) == 20
    assert recent[0]["deviceName"] == "Phone 21"
    timestamps = [item["timestamp"] for item in recent]
    assert timestamps == sorted(timestamps, reverse=True)


def test_export_contains_every_connection(client: TestClient) -> None:
    """Every connected device appears in the CSV with status connected."""
    names = ["Pixel 7", "iPhone", "Mac"]
    for name in names:
        _connect(client, name)

    r = client.get("/api/export")
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["success"] is True
    lines = body["csvData"].strip().split("\n")
    assert lines[0] == "Device Name,Connection Time,Status"
    rows = lines[1:]
    assert len(rows) == len(names)
    for row in rows:
        assert row.endswith(',"connected"')
    assert sorted(row.split('","')[0].lstrip('"') for row in rows) == sorted(names)
    assert rows[0].startswith('"Mac",')


def test_clear_then_statistics_scenario(client: TestClient) -> None:
    """Clearing wipes the history."""
    _connect(client, "iPhone")
    _connect(client, "Mac")

    r = client.delete("/api/clear")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"success": True, "message": "All data cleared successfully"}

    stats = _statistics(client)
    assert stats["totalConnections"] == 0
    assert stats["todayConnections"] == 0
    assert stats["uniqueDevices"] == 0
    assert stats["recentConnections"] == []


def test_clear_on_empty_store(client: TestClient) -> None:
    """Clearing an empty store still succeeds."""
    r = client.delete("/api/clear")
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["success"] is True


def test_store_failures_use_generic_messages(app: FastAPI, client: TestClient) -> None:
    """Each endpoint reports its own generic failure message."""
    app.dependency_overrides[get_connection_store] = lambda: _UnavailableStore()
    try:
        stats = client.get("/api/statistics")
        export = client.get("/api/export")
        clear = client.delete("/api/clear")
    finally:
        app.dependency_overrides.pop(get_connection_store, None)

    assert stats.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert stats.json() == {"success": False, "message": "Failed to fetch statistics"}
    assert export.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert export.json() == {"success": False, "message": "Failed to export data"}
    assert clear.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert clear.json() == {"success": False, "message": "Failed to clear data"}


class _CorruptStore:
    def list_all(self):
        raise RuntimeError("unexpected row shape")


def test_unhandled_errors_use_internal_server_error(app: FastAPI) -> None:
    """Exceptions outside the service taxonomy hit the app-wide handler."""
    app.dependency_overrides[get_connection_store] = lambda: _CorruptStore()
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            r = client.get("/api/statistics")
    finally:
        app.dependency_overrides.pop(get_connection_store, None)

    assert r.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert r.json() == {"success": False, "message": "Internal server error"}
