"""Core configuration for the WiFi Connect application."""
