"""Exception taxonomy shared by the service layer.

These types are for internal logging only. Callers of the HTTP API always
receive a generic failure message regardless of which one was raised.
"""


class WifiConnectError(RuntimeError):
    """Base exception for WiFi Connect service failures."""


class ValidationError(WifiConnectError):
    """Raised when a request carries malformed input."""


class PersistenceError(WifiConnectError):
    """Raised when the record store is unavailable or rejects a write.

    Unique constraint violations on the device identifier surface as this
    error rather than as a raw database exception.
    """


class NotFoundError(WifiConnectError):
    """Raised when a requested record does not exist."""
