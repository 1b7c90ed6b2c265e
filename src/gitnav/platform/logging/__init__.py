"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import PipelineRichHandler

__all__ = [
    "LOGGER_NAME",
    "PipelineRichHandler",
    "logger",
    "setup_logger",
]
