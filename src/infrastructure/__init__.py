"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, such as device receivers and health checks.
"""

from src.infrastructure import devices, services

__all__ = ["devices", "services"]
