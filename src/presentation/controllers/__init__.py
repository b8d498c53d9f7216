"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers pick a command selector,
hand it to an application use case and map the result (or the
domain error) to a response.
"""

from .dashboard_controller import router as dashboard_router
from .light_controller import router as light_router
from .system_controller import router as system_router

__all__ = ["light_router", "dashboard_router", "system_router"]
