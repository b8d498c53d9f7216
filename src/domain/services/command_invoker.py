"""
Command Invoker - Domain Service

The invoker is the only component that calls Command.execute(). It keeps
pending commands in a FIFO queue and runs them, in arrival order, when
drained.

Every entry point (direct enqueue, stage + commit_staged, and
enqueue_and_drain) feeds the same queue.

Thread safety:
    One re-entrant lock guards the queue and the staged slot. drain()
    holds it for the whole run, so it always executes a fully-formed
    prefix of what was enqueued. A command enqueued by another thread
    while a drain is running waits for the lock and is picked up by the
    next drain, not the current one. Ordering is only guaranteed for a
    single caller's own enqueue/drain sequence; use exclusive() to make
    such a sequence atomic with respect to other callers.
"""

from __future__ import annotations

import threading
from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterator, Optional

from src.domain.commands.base import Command
from src.domain.entities.device_state import DeviceState
from src.domain.entities.errors import NoStagedCommandError
from src.shared import get_logger

logger = get_logger(__name__)


class CommandInvoker:
    """FIFO queue of commands executed synchronously on demand."""

    def __init__(self) -> None:
        self._queue: Deque[Command] = deque()
        self._staged: Optional[Command] = None
        self._lock = threading.RLock()

    @property
    def staged(self) -> Optional[Command]:
        """The command waiting for commit_staged(), if any."""
        with self._lock:
            return self._staged

    @property
    def is_idle(self) -> bool:
        with self._lock:
            return not self._queue

    def enqueue(self, command: Optional[Command]) -> None:
        """Append a command to the tail of the queue. None is ignored."""
        if command is None:
            return
        with self._lock:
            self._queue.append(command)
            depth = len(self._queue)
        logger.debug(
            "invoker.command.enqueued",
            command=type(command).__name__,
            queue_size=depth,
        )

    def stage(self, command: Command) -> None:
        """Hold a command in the staged slot until commit_staged() is called."""
        with self._lock:
            self._staged = command

    def commit_staged(self) -> None:
        """
        Push the staged command onto the queue.

        The slot keeps its command afterwards, so committing again queues
        the same command a second time.

        Raises:
            NoStagedCommandError: If nothing has been staged
        """
        with self._lock:
            if self._staged is None:
                raise NoStagedCommandError()
            self.enqueue(self._staged)

    def drain(self) -> Optional[DeviceState]:
        """
        Execute every pending command in FIFO order.

        Returns:
            The snapshot produced by the last executed command, or None
            if the queue was already empty.

        Raises:
            DeviceUnreachableError: Propagated from a failing receiver.
                Commands queued behind the failing one stay queued.
        """
        with self._lock:
            if not self._queue:
                logger.debug("invoker.drain.empty")
                return None

            last_state: Optional[DeviceState] = None
            executed = 0
            while self._queue:
                command = self._queue.popleft()
                last_state = command.execute()
                executed += 1

        logger.info(
            "invoker.drain.completed",
            executed=executed,
            is_on=last_state.is_on if last_state else None,
        )
        return last_state

    def enqueue_and_drain(self, command: Optional[Command]) -> Optional[DeviceState]:
        """Enqueue a command and drain the queue as one atomic step."""
        with self._lock:
            self.enqueue(command)
            return self.drain()

    def size(self) -> int:
        """Number of commands waiting to be executed."""
        with self._lock:
            return len(self._queue)

    def clear(self) -> int:
        """
        Discard pending commands without executing them.

        Returns:
            int: The number of commands discarded
        """
        with self._lock:
            discarded = len(self._queue)
            self._queue.clear()
        if discarded:
            logger.info("invoker.queue.cleared", discarded=discarded)
        return discarded

    @contextmanager
    def exclusive(self) -> Iterator["CommandInvoker"]:
        """
        Hold the invoker lock for a multi-step caller sequence.

        Example:
            with invoker.exclusive():
                invoker.stage(command)
                invoker.commit_staged()
                state = invoker.drain()
        """
        with self._lock:
            yield self

    def __len__(self) -> int:
        return self.size()
