"""WiFi Connect: simulated WiFi onboarding API with connection statistics."""

__version__ = "1.0.0"
