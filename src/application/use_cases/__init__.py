"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data between
callers, the command invoker and the DTOs returned to them.
"""

from .health_use_cases import GetHealthStatusUseCase
from .light_use_cases import DispatchBatchUseCase, DispatchCommandUseCase

__all__ = [
    "DispatchCommandUseCase",
    "DispatchBatchUseCase",
    "GetHealthStatusUseCase",
]
