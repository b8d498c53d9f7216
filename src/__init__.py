"""
Source Code Root Module

This module serves as the root for the source code of the smart home hub.

Layer Structure:
- Domain: Device state, commands, the command invoker and ports
- Application: Use cases and DTOs
- Infrastructure: Device receivers and health checks
- Presentation: JSON API and HTML dashboard controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
