"""
Structured JSON logging for phonestore.

Keyword arguments passed to any log call are emitted as JSON fields, so
callers write ``logger.info("Created table", table=name)``.
"""

import inspect
import logging
import os

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "phonestore"

# Keywords that belong to logging itself rather than to the JSON payload
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel")


def _caller() -> str:
    # Two frames up: skip this helper and the Logger method that called it
    frame = inspect.currentframe()
    if frame and frame.f_back and frame.f_back.f_back:
        caller = frame.f_back.f_back
        return f"{caller.f_code.co_filename}:{caller.f_lineno}"
    return "unknown:0"


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(message)s",
            rename_fields={"asctime": "@timestamp", "levelname": "log_level"},
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


class Logger(logging.LoggerAdapter):
    """Process-wide adapter over the ``phonestore`` logger."""

    _instance = None

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            instance = super().__new__(cls)
            base = logging.getLogger(LOGGER_NAME)
            # Unknown LOG_LEVEL names fall back to INFO
            level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
            base.setLevel(level if isinstance(level, int) else logging.INFO)
            base.addHandler(_json_handler())
            logging.LoggerAdapter.__init__(instance, base)
            cls._instance = instance
        return cls._instance

    def __init__(self) -> None:
        # Configured once in __new__
        pass

    def error(self, msg: str, *args: tuple, **kwargs: dict) -> None:
        """Log an error tagged with the caller's file and line."""
        self.log(logging.ERROR, msg, *args, file=_caller(), **kwargs)

    def exception(
        self, msg: str, *args: tuple, exc_info: bool = True, **kwargs: dict
    ) -> None:
        """Log an error with traceback, tagged with the caller's file and line."""
        self.log(logging.ERROR, msg, *args, exc_info=exc_info, file=_caller(), **kwargs)

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        logging_kwargs = {}
        for key in _LOGGING_KWARGS:
            value = kwargs.pop(key, None)
            if value is not None:
                logging_kwargs[key] = value

        if kwargs:
            logging_kwargs["extra"] = kwargs
        return msg, logging_kwargs


logger = Logger()
