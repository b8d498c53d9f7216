"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It turns caller requests into commands for the
domain invoker and maps the results back to DTOs.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
