"""
Logging configuration module for the content core.

Modules log through ``logging.getLogger(__name__)``; this module wires those
loggers to handlers once per application:

- Console output, human readable in development and JSON otherwise
- Optional JSON files with size-based rotation (app.log, error.log)
- Request context enrichment for records emitted inside a request
- Optional Sentry error reporting when SENTRY_DSN is configured

Setting values and encryption keys are never passed to a logger; failures
involving them log the setting key only.
"""

import json
import logging
import logging.handlers
import os
import socket
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

import sentry_sdk
from flask import Flask, g, has_request_context, request
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

# Create a module-level logger
logger = logging.getLogger(__name__)

# Attributes every LogRecord carries; anything else was passed through extra=
_RESERVED_ATTRIBUTES = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "thread", "threadName", "taskName",
})

# Marks handlers installed here so a second create_app replaces them
_HANDLER_FLAG = '_content_core_handler'


class JsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Each record becomes one JSON object with timestamp, level, logger, message
    and source location, plus request details when emitted inside a request
    and any attributes passed through ``extra``.
    """

    def __init__(self):
        super().__init__()
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON with additional context."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "host": self.hostname,
        }

        # Include exception info if present
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "value": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        # Add Flask request context if available
        if has_request_context():
            log_data["request"] = {
                "id": getattr(g, 'request_id', None),
                "method": request.method,
                "endpoint": request.endpoint,
                "path": request.path,
                "remote_addr": request.remote_addr,
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRIBUTES and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def _rotating_handler(path: str, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=10 * 1024 * 1024, backupCount=10, encoding='utf-8'
    )
    handler.setFormatter(JsonFormatter())
    handler.setLevel(level)
    return handler


def setup_app_logging(app: Flask) -> None:
    """
    Configure centralized application logging.

    Args:
        app (Flask): The Flask application instance to configure logging for

    Example:
        app = Flask(__name__)
        setup_app_logging(app)
        app.logger.info("Application logging initialized")
    """
    root_logger = logging.getLogger()

    # Clear handlers from a previous call to avoid duplicates
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    is_dev = app.config.get('ENVIRONMENT', 'production') == 'development'
    log_level = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    root_logger.setLevel(numeric_level)

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    if is_dev:
        # Use a more readable format for development
        console_handler.setFormatter(logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(name)s: %(message)s'
        ))
    else:
        console_handler.setFormatter(JsonFormatter())
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if app.config.get('LOG_TO_FILE'):
        log_dir = app.config.get('LOG_DIR') or 'logs'
        if not os.path.isabs(log_dir):
            log_dir = os.path.join(app.root_path, log_dir)
        os.makedirs(log_dir, exist_ok=True)

        handlers.append(_rotating_handler(os.path.join(log_dir, 'app.log'), numeric_level))
        handlers.append(_rotating_handler(os.path.join(log_dir, 'error.log'), logging.ERROR))

    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        root_logger.addHandler(handler)

    app.logger.setLevel(numeric_level)

    # Configure Sentry for error reporting
    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration(), SqlalchemyIntegration()],
            environment=app.config.get('ENVIRONMENT'),
            release=app.config.get('VERSION', 'unknown'),
            send_default_pii=False,
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 0.1)
        )
        logger.info("Sentry error reporting initialized")

    logger.debug("Application logging initialized", extra={
        "environment": app.config.get('ENVIRONMENT'),
        "level": log_level,
        "log_to_file": bool(app.config.get('LOG_TO_FILE')),
    })
