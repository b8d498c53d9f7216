"""Domain services package."""

from .command_invoker import CommandInvoker

__all__ = ["CommandInvoker"]
