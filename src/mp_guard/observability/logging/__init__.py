"""Observability – structured logging helpers."""
from mp_guard.observability.logging.factory import JsonLoggerFactory
from mp_guard.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
