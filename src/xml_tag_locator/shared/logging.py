"""Structured logging utilities for tag location.

This module provides a correlation-aware logger that tags every record with the
component that emitted it, plus an opt-in scan trace used by the ``debug``
search option.
"""

import logging
from typing import Any, Dict, Optional

# Longest text preview attached to trace records
PREVIEW_LENGTH = 80


def preview(text: Optional[str], limit: int = PREVIEW_LENGTH) -> Optional[str]:
    """Shorten text for inclusion in log records."""
    if text is None or len(text) <= limit:
        return text
    return text[:limit] + "..."


class CorrelationLogger:
    """Logger that automatically includes correlation ID and component information."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None,
        trace_enabled: bool = False,
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID for request tracking
            component: Component name for structured logging
            trace_enabled: Whether ``trace`` calls emit records
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split(".")[-1]
        self.trace_enabled = trace_enabled

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        if extra:
            combined_extra.update(extra)
        return combined_extra

    def trace(self, message: str, **fields: Any) -> None:
        """Log a scan step at DEBUG level when tracing is enabled.

        Keyword fields are attached to the record's ``extra`` so handlers can
        render offsets and depths without parsing the message.
        """
        if not self.trace_enabled:
            return
        self.logger.debug(message, extra=self._get_extra(fields))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None,
    trace_enabled: bool = False,
) -> CorrelationLogger:
    """Get a correlation-aware logger instance.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID for request tracking
        component: Component name for structured logging
        trace_enabled: Whether scan trace records are emitted

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component, trace_enabled)
