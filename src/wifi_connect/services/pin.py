"""PIN check for the statistics view.

This is a presentation gate only. None of the HTTP endpoints require it.
"""

from __future__ import annotations

import secrets


class PinGate:
    """Compare submitted codes against the configured PIN."""

    def __init__(self, pin: str) -> None:
        self._pin = pin

    @property
    def length(self) -> int:
        return len(self._pin)

    def verify(self, candidate: str | None) -> bool:
        """Return True if ``candidate`` matches the configured PIN."""
        if not candidate or len(candidate) != self.length or not candidate.isdigit():
            return False
        return secrets.compare_digest(candidate.encode(), self._pin.encode())
