"""
Purpose: Centralized logging configuration with redaction of session cookies.
Constraints: Logging only; no business logic.
"""

# Imports
import logging
import os
import re
import sys
import threading
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

_REDACTED = "[redacted]"

_TOKEN_PATTERNS = [
    re.compile(r"(?i)(\bcookie\s*[:=]\s*)[^\s,;]+(?:;\s*[^\s,;]+)*"),
    re.compile(r"(\b_zenn_session=)[^\s;,'\"]+"),
    re.compile(r"(\bremember_user_token=)[^\s;,'\"]+"),
]


def _redact_text(text: str) -> str:
    if not text:
        return text
    redacted = text
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub(lambda m: m.group(1) + _REDACTED, redacted)
    return redacted


def _is_enabled(name: str, default: str = "1") -> bool:
    return os.getenv(name, default).lower() not in ("0", "false", "no")


# Public API
class UnifiedLogger:
    """Configures root handlers once; every module logger propagates to them"""

    _lock = threading.Lock()
    _global_initialized = False

    def __init__(self, name: str = "scrap2md", log_level: Optional[str] = None):
        self.name = name

        if log_level is None:
            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        level = getattr(logging, log_level.upper(), logging.INFO)

        with self._lock:
            self.logger = logging.getLogger(name)
            self.logger.setLevel(level)
            if not UnifiedLogger._global_initialized:
                self._ensure_root_logger(level)
                UnifiedLogger._global_initialized = True
            self.logger.propagate = True

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger

    def _ensure_root_logger(self, level: int) -> None:
        root_logger = logging.getLogger()
        if root_logger.handlers:
            return

        # stderr keeps stdout free for --stdout Markdown output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(
            getattr(logging, os.getenv("CONSOLE_LOG_LEVEL", "INFO").upper(), logging.INFO)
        )
        simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(self._wrap(simple_formatter))
        root_logger.addHandler(console_handler)

        if _is_enabled("LOG_TO_FILE", "0"):
            logs_dir = Path(os.getenv("LOG_DIR", "logs"))
            logs_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d")
            file_handler = RotatingFileHandler(
                logs_dir / f"scrap2md_{timestamp}.log",
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            detailed_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
            )
            file_handler.setFormatter(self._wrap(detailed_formatter))
            root_logger.addHandler(file_handler)

        root_logger.setLevel(level)

    @staticmethod
    def _wrap(formatter: logging.Formatter) -> logging.Formatter:
        if _is_enabled("LOG_REDACTION"):
            return _RedactingFormatter(formatter)
        return formatter


def setup_logger(name: str = "scrap2md", log_level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger, initializing the root handlers on first use"""
    return UnifiedLogger(name=name, log_level=log_level).get_logger()


class _RedactingFormatter(logging.Formatter):
    def __init__(self, base: logging.Formatter):
        super().__init__(base._fmt, base.datefmt)
        self._base = base

    def format(self, record: logging.LogRecord) -> str:
        original_msg, original_args = record.msg, record.args
        record.msg = _redact_text(record.getMessage())
        record.args = ()
        try:
            return self._base.format(record)
        finally:
            record.msg, record.args = original_msg, original_args
