"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NoStagedCommandError(DomainError):
    """Raised when a staged command is committed before one was staged."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        message = "No command has been staged. Call stage() first."
        super().__init__(message, details)


class UnknownCommandTypeError(DomainError):
    """Raised when a command selector has no registered command."""

    def __init__(self, command_type: Any, details: Optional[Dict[str, Any]] = None):
        message = f"Unknown command type: {command_type}"
        super().__init__(message, details)


class DeviceUnreachableError(DomainError):
    """Raised by a device receiver that cannot reach its hardware."""

    def __init__(self, device_name: str, details: Optional[Dict[str, Any]] = None):
        message = f"Device {device_name} is unreachable"
        super().__init__(message, details)
