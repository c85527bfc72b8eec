"""
Unified logging configuration with structured JSON logging, context support, and multiple handlers
"""
import json
import logging
import re
import sys
from contextvars import ContextVar
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List

from app.core.config import get_settings

# Context variables for request context
request_context: ContextVar[Dict[str, Any]] = ContextVar('request_context', default={})

# logging_config.py is at: backend/app/core/logging_config.py
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

_RESERVED_RECORD_KEYS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
])


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in log messages"""

    SENSITIVE_PATTERNS = [
        (r'(x[_-]?)?api[_-]?key["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)', r'api_key": "***"'),
        (r'token["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)', r'token": "***"'),
        (r'secret["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)', r'secret": "***"'),
        (r'password["\']?\s*[:=]\s*["\']?([^"\'\s&,}]+)', r'password": "***"'),
        (r'Bearer\s+([^\s"]+)', r'Bearer ***'),
    ]

    def __init__(self, enabled: bool = True):
        super().__init__()
        self.enabled = enabled

    def _mask(self, text: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = re.sub(pattern, replacement, text, flags=re.IGNORECASE)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter and mask sensitive data"""
        if not self.enabled:
            return True

        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                self._mask(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        return True


class ContextualFormatter(logging.Formatter):
    """JSON formatter with request context support"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_dict = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        # Add context from contextvars
        ctx = request_context.get({})
        if ctx:
            log_dict.update(ctx)

        if record.exc_info:
            log_dict['exception'] = self.formatException(record.exc_info)

        # Add extra fields from record (from extra= parameter in logging calls)
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_KEYS or key in log_dict:
                continue
            try:
                json.dumps(value, default=str)
                log_dict[key] = value
            except (TypeError, ValueError):
                log_dict[key] = str(value)

        return json.dumps(log_dict, ensure_ascii=False, default=str)


_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingConfig:
    """Centralized logging configuration with structured logging support"""

    _configured = False
    _log_metrics: Dict[str, int] = dict.fromkeys(_LEVEL_NAMES, 0)

    @classmethod
    def configure(cls):
        """Configure logging for the application"""
        if cls._configured:
            return

        settings = get_settings()

        levels = {
            "uvicorn.access": "INFO" if settings.log_uvicorn_access else "WARNING",
            "uvicorn.error": "INFO",
            "app": settings.log_level,
        }
        levels.update(settings.module_levels)

        logging.basicConfig(
            level=_level(settings.log_level),
            handlers=cls._build_handlers(settings),
            force=True
        )
        for module, level in levels.items():
            logging.getLogger(module).setLevel(_level(level))

        metrics_handler = cls._MetricsHandler()
        metrics_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(metrics_handler)

        cls._configured = True

    @staticmethod
    def _build_handlers(settings) -> List[logging.Handler]:
        if settings.log_format == "json":
            formatter = ContextualFormatter(datefmt=_DATE_FORMAT)
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt=_DATE_FORMAT
            )

        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

        if settings.log_file_enabled:
            log_path = Path(settings.log_file_path)
            if not log_path.is_absolute():
                log_path = _PROJECT_ROOT / log_path
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(TimedRotatingFileHandler(
                filename=str(log_path),
                when='midnight',
                backupCount=settings.log_file_retention,
                encoding='utf-8'
            ))

        sensitive_filter = SensitiveDataFilter(enabled=not settings.log_sensitive_data)
        for handler in handlers:
            handler.setFormatter(formatter)
            handler.addFilter(sensitive_filter)
        return handlers

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for a module"""
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)

    @classmethod
    def set_context(cls, **kwargs):
        """Merge kwargs into the current request's log context"""
        request_context.set({**request_context.get({}), **kwargs})

    @classmethod
    def clear_context(cls):
        request_context.set({})

    @classmethod
    def get_metrics(cls) -> Dict[str, int]:
        """Log record counts per level since the last reset"""
        return cls._log_metrics.copy()

    @classmethod
    def reset_metrics(cls):
        cls._log_metrics = dict.fromkeys(_LEVEL_NAMES, 0)

    class _MetricsHandler(logging.Handler):
        """Counts records by level"""

        def emit(self, record: logging.LogRecord):
            if record.levelname in LoggingConfig._log_metrics:
                LoggingConfig._log_metrics[record.levelname] += 1


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)
