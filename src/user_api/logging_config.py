"""Logging configuration for structured logging.

This module provides structured logging configuration, a request logging
middleware that tags every request with an ID, and helpers for recording
database operations.
"""

import json
import logging
import logging.config
import sys
import time
import uuid
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import Settings

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RESERVED_RECORD_ATTRS = frozenset({
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "getMessage",
    "exc_info",
    "exc_text",
    "stack_info",
    "message",
})


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON objects with timestamp, level, logger,
    message, source location and any ``extra`` fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_ATTRS
        }
        if extra_fields:
            log_data["extra"] = extra_fields

        return json.dumps(log_data, default=str, ensure_ascii=False)


class RequestContextFilter(logging.Filter):
    """Logging filter that guarantees request context attributes exist.

    Records logged outside a request get ``None`` for request ID, path and
    method so formatters can rely on the attributes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = getattr(record, "request_id", None)
        record.client_ip = getattr(record, "client_ip", None)
        record.path = getattr(record, "path", None)
        record.method = getattr(record, "method", None)
        return True


def setup_logging(settings: Settings) -> None:
    """Setup logging configuration based on settings.

    Args:
        settings: Application settings containing logging configuration
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    formatter = "simple" if settings.debug else "json"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JSONFormatter,
            },
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "filters": {
            "request_context": {
                "()": RequestContextFilter,
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": formatter,
                "filters": ["request_context"],
                "stream": sys.stdout,
            }
        },
        "loggers": {
            "user_api": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
            "uvicorn.access": {
                "level": "INFO" if settings.debug else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
            "fastapi": {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "INFO" if settings.debug else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.pool": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }

    logging.config.dictConfig(logging_config)

    logger = logging.getLogger("user_api")
    logger.info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "debug_mode": settings.debug,
            "formatter": formatter,
        },
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging.

    Logs incoming requests and outgoing responses with timing information
    and adds an ``X-Request-ID`` header to every response.
    """

    def __init__(self, app: ASGIApp, logger_name: str = "user_api.requests") -> None:
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        client_ip = request.client.host if request.client else None
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            client_ip = forwarded_for.split(",")[0].strip()

        start_time = time.time()

        self.logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": client_ip,
                "user_agent": request.headers.get("User-Agent"),
                "event_type": "request_started",
            },
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            self.logger.error(
                f"Request failed: {request.method} {request.url.path} - {type(exc).__name__}",
                exc_info=True,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "exception_type": type(exc).__name__,
                    "process_time": round(time.time() - start_time, 4),
                    "client_ip": client_ip,
                    "event_type": "request_failed",
                },
            )
            raise

        process_time = time.time() - start_time
        self.logger.info(
            f"Request completed: {request.method} {request.url.path} - {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time": round(process_time, 4),
                "client_ip": client_ip,
                "event_type": "request_completed",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, prefixed with ``user_api.`` when missing

    Returns:
        Logger instance
    """
    if not name.startswith("user_api."):
        name = f"user_api.{name}"

    return logging.getLogger(name)


def log_database_operation(
    operation: str,
    table: str,
    success: bool = True,
    duration: float | None = None,
    error: str | None = None,
    **kwargs,
) -> None:
    """Log database operation.

    Args:
        operation: Type of operation (SELECT, INSERT)
        table: Database table name
        success: Whether operation was successful
        duration: Operation duration in seconds
        error: Error message (if applicable)
        **kwargs: Additional context data
    """
    logger = get_logger("database")
    level = logging.DEBUG if success else logging.ERROR
    message = f"Database {operation} on {table}"

    if not success and error:
        message += f" failed: {error}"

    extra_data = {
        "event_type": "database_operation",
        "operation": operation,
        "table": table,
        "success": success,
        "duration": duration,
    }

    if error:
        extra_data["error"] = error

    extra_data.update(kwargs)

    logger.log(level, message, extra=extra_data)
