"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities and enums that are used
across multiple layers of the application.

Its primary responsibilities include:
- Defining cross-layer enums (environment names, log levels)
- Configuring structured logging for every layer

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
