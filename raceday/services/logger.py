"""
Structured logging service for API errors and events.

This module builds one log entry per API error or notable event and emits it
through the standard logging machinery, for audit trails and troubleshooting.
"""

import logging
import os
import traceback
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from fastapi import Request

from ..config.settings import get_settings

LEVELS = {"ERROR": logging.ERROR, "WARNING": logging.WARNING, "INFO": logging.INFO}


class ApiLogger:
    """Service for logging API errors and events."""

    def __init__(self, enabled: bool | None = None, logger_name: str = "raceday.api"):
        """Initialize the API logger."""
        self.enabled = get_settings().api_logging_enabled if enabled is None else enabled
        self.user = os.getenv("RACEDAY_USER") or "api"
        self.logger = logging.getLogger(logger_name)

    def build_entry(
        self,
        error: Exception,
        request: Request | None = None,
        level: str = "ERROR",
        additional_context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Build the structured log entry for an error.

        Args:
            error: The exception that occurred
            request: The FastAPI request object (optional)
            level: Log level (ERROR, WARNING, INFO)
            additional_context: Additional context to include in the log

        Returns:
            dict: The log entry
        """
        context = dict(additional_context or {})
        status_code = context.pop("status_code", None)
        execution_time = context.pop("execution_time_ms", None)

        stack_trace = None
        if error.__traceback__ is not None:
            stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))

        return {
            "log_id": str(uuid4()),
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level,
            "endpoint": request.url.path if request else None,
            "method": request.method if request else None,
            "status_code": status_code,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "stack_trace": stack_trace,
            "user": self.user,
            "execution_time_ms": execution_time,
            "context": context,
        }

    def log_error(
        self,
        error: Exception,
        request: Request | None = None,
        level: str = "ERROR",
        additional_context: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Log an error.

        Args:
            error: The exception that occurred
            request: The FastAPI request object (optional)
            level: Log level (ERROR, WARNING, INFO)
            additional_context: Additional context to include in the log

        Returns:
            The emitted entry, or None when logging is disabled or fails
        """
        if not self.enabled:
            return None

        try:
            entry = self.build_entry(
                error, request=request, level=level, additional_context=additional_context
            )
            self.logger.log(
                LEVELS.get(level, logging.ERROR),
                f"{entry['error_type']}: {entry['error_message']}",
                extra={"api_log": entry},
            )
            return entry
        except Exception as log_error:
            logging.getLogger(__name__).warning(f"Failed to log API error: {log_error}")
            return None

    def log_event(
        self,
        message: str,
        request: Request | None = None,
        level: str = "INFO",
        additional_context: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Log a general event.

        Args:
            message: The event message
            request: The FastAPI request object (optional)
            level: Log level (ERROR, WARNING, INFO)
            additional_context: Additional context to include in the log
        """
        class LogEvent(Exception):
            pass

        return self.log_error(
            LogEvent(message),
            request=request,
            level=level,
            additional_context=additional_context,
        )


api_logger = ApiLogger()
