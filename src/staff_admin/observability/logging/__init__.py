"""Observability – structlog configuration and logger helpers."""
from staff_admin.observability.logging.factory import JsonLoggerFactory
from staff_admin.observability.logging.processors import bind_correlation_id, current_correlation_id, get_logger

__all__ = ["JsonLoggerFactory", "bind_correlation_id", "current_correlation_id", "get_logger"]
