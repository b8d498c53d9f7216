"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.application.use_cases.light_use_cases import (
    DispatchBatchUseCase,
    DispatchCommandUseCase,
)
from src.domain.commands import (
    ActivateCommand,
    CommandRegistry,
    CommandType,
    DeactivateCommand,
    QueryStatusCommand,
)
from src.domain.services.command_invoker import CommandInvoker
from src.infrastructure.devices import SimulatedLight
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure (receiver)
    light_receiver = providers.Singleton(
        SimulatedLight,
        name=config.device.name,
        initially_on=config.device.initially_on,
    )

    # Domain (commands share the one receiver)
    activate_command = providers.Singleton(ActivateCommand, receiver=light_receiver)
    deactivate_command = providers.Singleton(
        DeactivateCommand, receiver=light_receiver
    )
    query_status_command = providers.Singleton(
        QueryStatusCommand, receiver=light_receiver
    )

    command_registry = providers.Singleton(
        CommandRegistry,
        commands=providers.Dict(
            {
                CommandType.LIGHT_ON: activate_command,
                CommandType.LIGHT_OFF: deactivate_command,
                CommandType.GET_STATUS: query_status_command,
            }
        ),
    )

    command_invoker = providers.Singleton(CommandInvoker)

    health_check_service = providers.Singleton(
        HealthCheckService,
        receiver=light_receiver,
        invoker=command_invoker,
        device_name=config.device.name,
        max_pending_commands=config.device.max_pending_commands,
    )

    # Application (use cases)
    dispatch_command_use_case = providers.Factory(
        DispatchCommandUseCase,
        command_registry=command_registry,
        command_invoker=command_invoker,
    )

    dispatch_batch_use_case = providers.Factory(
        DispatchBatchUseCase,
        command_registry=command_registry,
        command_invoker=command_invoker,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for in-process resources.

    The receiver and invoker are created eagerly on startup. On shutdown,
    commands still waiting in the invoker queue are discarded, never run.
    """
    container = get_container()

    receiver = container.light_receiver()
    invoker = container.command_invoker()

    try:
        logger.info(
            "container.device.ready",
            device=receiver.name,
            is_on=receiver.is_active(),
        )
        logger.info("container.resources.initialized")
        yield container

    finally:
        discarded = invoker.clear()
        logger.info("container.invoker.cleared", discarded=discarded)
        logger.info("container.resources.shutdown")
