"""LienPilot HTTP API."""
