"""Queue of commands processed on the thread that owns the executer."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any

from spixbot.command import Command
from spixbot.state import CommandEnvironment, ExecuterState


class CommandExecuter:
    """Holds a queue of commands and runs them on the main thread.

    Commands may be enqueued from any thread; every other operation must
    happen on the thread that created the executer.
    """

    def __init__(self) -> None:
        self._main_thread_id = threading.get_ident()
        self._lock = threading.Lock()
        self._queue: deque[Command] = deque()
        self._state = ExecuterState()

    def _check_main_thread(self) -> None:
        if threading.get_ident() != self._main_thread_id:
            raise RuntimeError("CommandExecuter used outside its main thread")

    @property
    def state(self) -> ExecuterState:
        """The state shared by all executed commands."""
        self._check_main_thread()
        return self._state

    def enqueue_command(self, command: Command) -> None:
        """Add a command to the end of the queue; safe from any thread."""
        with self._lock:
            self._queue.append(command)

    def process_commands(self, scene: Any) -> None:
        """Run queued commands in order until one is not ready yet."""
        self._check_main_thread()

        locked = self._lock.acquire(blocking=False)
        if not locked:
            return
        try:
            env = CommandEnvironment(scene, self._state)
            while self._queue:
                command = self._queue[0]
                if not command.can_execute_now():
                    break
                self._queue.popleft()

                self._lock.release()
                locked = False
                command.execute(env)
                locked = self._lock.acquire(blocking=False)
                if not locked:
                    return
        finally:
            if locked:
                self._lock.release()