"""Observability – structlog-based logging."""
from permcompute.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
