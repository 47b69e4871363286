"""
JSON logging shared by the echo server and the load runner.

One line per record on stdout, e.g.:

    {"timestamp": "2024-02-06T10:30:45", "level": "INFO",
     "name": "echobench.app.middleware", "message": "Request completed",
     "correlation_id": "abc-123", "component": "echo-server",
     "method": "POST", "path": "/endpoint", "status_code": 200}

Two kinds of context are stamped onto every record:
- correlation_id: the request being handled (server side), "none" elsewhere
- run context: fields bound once per process, such as the component name,
  or the payload variant and Locust user class on the load side
"""
import logging
import os
import sys
import uuid
from contextvars import ContextVar
from typing import Dict, Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT = '%(timestamp)s %(level)s %(name)s %(message)s'
QUIET_LOGGERS = ("uvicorn.access", "urllib3")

correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

_run_context: Dict[str, object] = {}


class ContextFilter(logging.Filter):
    """Stamp correlation ID and run context; explicit `extra` fields win."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get() or 'none'
        for key, value in _run_context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class JsonLineFormatter(jsonlogger.JsonFormatter):

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = self.formatTime(record, self.datefmt)
        log_record['level'] = record.levelname


def bind_context(**fields):
    """Add fields to every record logged from now on in this process."""
    _run_context.update(fields)


def clear_context():
    _run_context.clear()


def setup_logging(level: Optional[str] = None, stream=None, **context):
    """
    Route all logging through one JSON handler.

    Args:
        level: Log level name; LOG_LEVEL from the environment when omitted
        stream: Where to write, stdout by default
        **context: Run context bound to every record (see bind_context)
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonLineFormatter(LOG_FORMAT, datefmt='%Y-%m-%dT%H:%M:%S'))
    handler.addFilter(ContextFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    bind_context(**context)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Use the given ID (or a fresh UUID) for records in the current context."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
