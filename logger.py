"""
Logging configuration with optional rotating file handlers
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional
from config import settings


def get_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """Get configured logger instance"""
    logger = logging.getLogger(name)

    # Set log level from settings
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(log_level)

    # Prevent duplicate logs
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_format = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # File format - more detailed
        file_format = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_handler = RotatingFileHandler(
            log_dir / (log_file or "koala_bridge.log"),
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_format)

        error_handler = RotatingFileHandler(
            log_dir / "errors.log",
            maxBytes=settings.log_file_max_bytes,
            backupCount=settings.log_file_backup_count
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_format)

        logger.addHandler(file_handler)
        logger.addHandler(error_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
