from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None

# Third-party loggers that are chatty at INFO.
_NOISY_LOGGERS = ("discord", "httpx", "httpcore")


class ContextFilter(logging.Filter):
    """Copies the current log context onto the record before it is queued."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        record.log_context = get_context()
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True


def bootstrap_logging(
    *,
    service: str = "bot",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "bot.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    context_filter = ContextFilter(service)

    # Console is on by default for a long-running bot; LOG_CONSOLE=false silences it.
    if os.getenv("LOG_CONSOLE", "true").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter(color=os.getenv("NO_COLOR") is None))
        console.addFilter(context_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(context_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
