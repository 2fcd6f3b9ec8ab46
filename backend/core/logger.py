# core/logger.py
import json
import logging
import os

from contextvars import ContextVar
from logging import LogRecord
from logging.handlers import RotatingFileHandler

from core.settings import settings

request_id_ctx_var = ContextVar("request_id", default=None)

LOG_DIR = settings.LOG_DIR
LOG_FILE = os.path.join(LOG_DIR, "storefront.log")
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5  # Keep 5 backups
CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s [%(request_id)s] - %(message)s"

class JsonFormatter(logging.Formatter):
    """One JSON object per line: storefront.log is read by log shippers, not people"""

    def format(self, record: LogRecord) -> str:
        log_entry = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
            "message": record.getMessage(),
            "environment": settings.ENVIRONMENT,
        }
        if getattr(record, "request_id", "-") != "-":
            log_entry["request_id"] = record.request_id
        # logger.info(..., extra={"context": {...}}) attaches structured fields
        context = getattr(record, "context", None)
        if context:
            log_entry["context"] = context
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)

class RequestIdFilter(logging.Filter):
    def filter(self, record: LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get() or "-"
        return True

def get_logger(name: str) -> logging.Logger:
    os.makedirs(LOG_DIR, exist_ok=True)

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger  # Already configured

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(settings.LOG_LEVEL.upper())
    logger.addHandler(console_handler)

    # File Handler (JSON)
    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    file_handler.setFormatter(JsonFormatter())
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)

    # Request id must be on the record before either handler formats it
    logger.addFilter(RequestIdFilter())

    return logger
