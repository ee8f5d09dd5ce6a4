"""Utility helpers for obfsignals."""

from .logger import get_logger, setup_logger
from .output import OutputFormatter

__all__ = ["OutputFormatter", "get_logger", "setup_logger"]
