"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Following Clean Architecture principles, it must not depend on
Infrastructure or Frameworks beyond the logging stack.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumRetryStrategy
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumRetryStrategy",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
