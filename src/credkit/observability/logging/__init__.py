"""Observability – structlog helpers and secret redaction."""
from credkit.observability.logging.factory import JsonLoggerFactory
from credkit.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    DEFAULT_SENSITIVE_SUFFIXES,
    SensitiveFieldsFilter,
)
from credkit.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "DEFAULT_SENSITIVE_SUFFIXES",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
