#!/usr/bin/env python3
"""
Server Entry Point - Main Layer

This module serves as the entry point for running the HTTP service.
It loads the settings and starts uvicorn with the FastAPI application
defined in app.py.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import get_logger

logger = get_logger(__name__)


def main():
    """Main entry point for the HTTP server."""

    settings = get_settings()

    logger.info(
        "Starting HTTP server",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
