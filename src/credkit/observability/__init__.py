"""Observability – structured logging for credkit."""
