"""Base command type and the generic commands that need no scene."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Callable

from spixbot.state import CommandEnvironment


class Command(ABC):
    """A unit of work executed by a CommandExecuter on the main thread."""

    @abstractmethod
    def execute(self, env: CommandEnvironment) -> None:
        """Run the command against the given environment."""

    def can_execute_now(self) -> bool:
        """Return whether the command is ready to run; ready by default."""
        return True


class CustomCmd(Command):
    """A command built from two callables."""

    def __init__(
        self,
        exec_fn: Callable[[CommandEnvironment], None],
        can_exec_fn: Callable[[], bool],
    ) -> None:
        self._exec_fn = exec_fn
        self._can_exec_fn = can_exec_fn

    def execute(self, env: CommandEnvironment) -> None:
        self._exec_fn(env)

    def can_execute_now(self) -> bool:
        return bool(self._can_exec_fn())


class Wait(Command):
    """Blocks the command queue for a time.

    The timer starts the first time readiness is queried, and that first
    query always reports not ready.
    """

    def __init__(self, wait_time: timedelta | float) -> None:
        if isinstance(wait_time, timedelta):
            self._wait_seconds = wait_time.total_seconds()
        else:
            self._wait_seconds = float(wait_time)
        self._start_time: float | None = None

    @property
    def wait_seconds(self) -> float:
        """The waiting time in seconds."""
        return self._wait_seconds

    def execute(self, env: CommandEnvironment) -> None:
        pass

    def can_execute_now(self) -> bool:
        if self._start_time is None:
            self._start_time = time.monotonic()
            return False
        return time.monotonic() - self._start_time >= self._wait_seconds