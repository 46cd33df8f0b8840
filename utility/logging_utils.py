# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-01
# Description: logging_utils.py
# -----------------------------------------------------------------------------
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import colorlog

BASE_LOGGER_NAME = "docchat"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}
MESSAGE_COLORS = {
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "light_red",
    "CRITICAL": "red",
}


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "y", "on")


def _console_handler() -> logging.Handler:
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=(
                "%(log_color)s%(asctime)s [%(levelname)s] "
                "%(name)s:%(lineno)d:%(reset)s %(message_log_color)s%(message)s"
            ),
            datefmt=DATE_FORMAT,
            log_colors=LEVEL_COLORS,
            secondary_log_colors={"message": MESSAGE_COLORS},
            style="%",
        )
    )
    return handler


def _file_handler() -> logging.Handler:
    """Rotating plain-text log, enabled with DOCCHAT_LOG_TO_FILE=1."""
    log_path = Path(os.getenv("DOCCHAT_LOG_FILE", "./logs/docchat.log"))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=int(os.getenv("DOCCHAT_LOG_MAX_BYTES", str(5 * 1024 * 1024))),  # 5MB
        backupCount=int(os.getenv("DOCCHAT_LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s", datefmt=DATE_FORMAT)
    )
    return handler


def get_class_logger(cls: type) -> logging.Logger:
    """
    Logger named after the module and class of `cls`, e.g.

      docchat.chunking.DocChunker.DocChunker
      docchat.embedding.DocEmbeddingGateway.DocEmbeddingGateway

    Handlers are attached the first time a name is requested.
    """
    module = getattr(cls, "__module__", "unknown_module")
    classname = getattr(cls, "__name__", "UnknownClass")
    logger = logging.getLogger(f"{BASE_LOGGER_NAME}.{module}.{classname}")

    if logger.handlers:
        return logger

    logger.addHandler(_console_handler())
    if _env_flag("DOCCHAT_LOG_TO_FILE"):
        logger.addHandler(_file_handler())

    level_name = os.getenv("DOCCHAT_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False
    return logger
