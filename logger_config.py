# logger_config.py
import logging
from logging.handlers import RotatingFileHandler
import os
import config


def get_logger(name=__name__, log_to_file=None):
    logger = logging.getLogger(name)
    if logger.hasHandlers():
        return logger

    # Convert string level (e.g., "DEBUG") to actual logging constant
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(level)

    # === Console handler ===
    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter("[%(asctime)s.%(msecs)03d]  %(levelname)s - %(name)s - %(message)s", "%H:%M:%S")
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_to_file is None:
        log_to_file = config.LOG_TO_FILE

    # === Rotating File Handler ===
    if log_to_file:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=os.path.join(config.LOG_DIR, "app.log"),
            maxBytes=1024 * 100,      # rotate at 100KB
            backupCount=5,
            encoding="utf-8"
        )
        file_formatter = logging.Formatter(
            "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s",
            "%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # === Error File Handler (Only ERROR+) ===
        error_handler = RotatingFileHandler(
            filename=os.path.join(config.LOG_DIR, "error.log"),
            maxBytes=1024 * 50,
            backupCount=3,
            encoding="utf-8"
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        logger.addHandler(error_handler)

    return logger
