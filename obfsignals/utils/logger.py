#!/usr/bin/env python3
"""
Logging utilities for obfsignals
"""

import logging
import sys

import colorlog

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s - %(message)s"


def setup_logger(name: str = "obfsignals", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with a colorised console handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "obfsignals") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
