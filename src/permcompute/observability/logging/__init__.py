"""Observability – structured logging helpers."""
from permcompute.observability.logging.factory import JsonLoggerFactory
from permcompute.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
