"""
Light Use Cases - Application Layer

This module defines use cases that turn a caller's command selection
into queued work on the shared invoker, and hand back the resulting
device state. Callers never touch the receiver directly.
"""

from typing import Optional, Sequence

from dependency_injector.wiring import Provide, inject

from src.application.dtos.device_state_dto import DeviceStateDTO
from src.domain.commands.command_type import CommandType
from src.domain.commands.registry import CommandRegistry
from src.domain.entities.device_state import DeviceState
from src.domain.entities.errors import DomainError
from src.domain.services.command_invoker import CommandInvoker
from src.shared import get_logger

logger = get_logger(__name__)


class DispatchCommandUseCase:
    """Use case for running a single command and returning its snapshot."""

    @inject
    def __init__(
        self,
        command_registry: CommandRegistry = Provide["command_registry"],
        command_invoker: CommandInvoker = Provide["command_invoker"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            command_registry: Resolves selectors to bound commands
            command_invoker: Shared invoker owning the command queue
        """
        self.command_registry = command_registry
        self.command_invoker = command_invoker

    async def execute(self, command_type: CommandType) -> DeviceStateDTO:
        """
        Stage, commit and drain the selected command.

        The three steps run under the invoker lock so a concurrent request
        cannot drain this command and take its snapshot. If the drain fails,
        whatever is still queued is discarded before the lock is released.

        Args:
            command_type: Selector of the command to run

        Returns:
            DeviceStateDTO: State of the device after the drain

        Raises:
            DomainError: If the selector is unknown or the device fails
        """
        logger.info("command.dispatch_started", command_type=command_type.value)

        try:
            command = self.command_registry.resolve(command_type)

            with self.command_invoker.exclusive() as invoker:
                invoker.stage(command)
                invoker.commit_staged()
                state = _drain_or_discard(invoker)

        except DomainError as e:
            logger.error(
                "command.dispatch_failed",
                command_type=command_type.value,
                error=e.message,
                details=e.details,
            )
            raise

        if state is None:
            raise DomainError(
                "Invoker drained no command",
                details={"command_type": command_type.value},
            )

        logger.info(
            "command.dispatched",
            command_type=command_type.value,
            is_on=state.is_on,
        )
        return DeviceStateDTO.from_domain(state)


class DispatchBatchUseCase:
    """Use case for queueing several commands and draining them once."""

    @inject
    def __init__(
        self,
        command_registry: CommandRegistry = Provide["command_registry"],
        command_invoker: CommandInvoker = Provide["command_invoker"],
    ):
        self.command_registry = command_registry
        self.command_invoker = command_invoker

    async def execute(
        self, command_types: Sequence[CommandType]
    ) -> Optional[DeviceStateDTO]:
        """
        Enqueue every selector in order, then drain.

        Selectors are all resolved before anything is queued, so an unknown
        one leaves the queue untouched. A device failure part way through
        discards the rest of the batch.

        Returns:
            The snapshot of the last command, or None for an empty batch
        """
        commands = [self.command_registry.resolve(t) for t in command_types]

        with self.command_invoker.exclusive() as invoker:
            for command in commands:
                invoker.enqueue(command)
            state = _drain_or_discard(invoker)

        logger.info(
            "command.batch_dispatched",
            command_count=len(commands),
            is_on=state.is_on if state else None,
        )
        if state is None:
            return None
        return DeviceStateDTO.from_domain(state)


def _drain_or_discard(invoker: CommandInvoker) -> Optional[DeviceState]:
    """Drain the invoker, dropping leftover commands if a command fails."""
    try:
        return invoker.drain()
    except DomainError:
        discarded = invoker.clear()
        logger.warning("command.queue.discarded", discarded=discarded)
        raise
