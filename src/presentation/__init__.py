"""
Presentation Layer Package

This package contains the presentation layer components,
which are responsible for handling HTTP requests and responses,
including the JSON API, the HTML dashboard and its templates.
"""

from src.presentation import controllers

__all__ = ["controllers"]
