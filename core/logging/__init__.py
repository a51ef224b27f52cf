"""Structured logging: console + JSON-lines file, per-command context."""
from .config import bootstrap_logging, shutdown_logging
from .context import get_context, log_context
from .logger import LogLevel, StructuredLogger, get_logger, traceable

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'get_context',
    'log_context',
    'LogLevel',
    'StructuredLogger',
    'get_logger',
    'traceable',
]
