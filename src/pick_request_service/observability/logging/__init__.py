"""Observability – structured logging."""
from pick_request_service.observability.logging.factory import configure_logging
from pick_request_service.observability.logging.processors import MessageContextProcessor, get_logger

__all__ = ["MessageContextProcessor", "configure_logging", "get_logger"]
