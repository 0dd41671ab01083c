import json
import logging
import sys
import time
from logging import Logger
from typing import Optional

from sharerecon.config import LOG_LEVEL


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter for log records (UTC timestamps)."""

    converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def configure_logging(level: Optional[str] = None, json_output: bool = False) -> None:
    """
    Configure global logging. Logs go to stderr; stdout carries the secrets.
    """
    effective_level = level or LOG_LEVEL
    handler = logging.StreamHandler(sys.stderr)
    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    handler.setFormatter(formatter)
    logging.basicConfig(
        level=getattr(logging, effective_level.upper(), logging.WARNING),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
