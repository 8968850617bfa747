"""Error bookkeeping shared by the commands of one executer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

CommandError = str


@dataclass
class ExecuterState:
    """Collects the errors reported while commands run."""

    _errors: list[CommandError] = field(default_factory=list)

    def report_error(self, error: CommandError) -> None:
        """Record an error message."""
        self._errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any error has been reported."""
        return bool(self._errors)

    def errors(self) -> list[CommandError]:
        """Return a copy of the reported errors, oldest first."""
        return list(self._errors)

    def errors_description(self) -> str:
        """Return all errors joined by newlines."""
        return "\n".join(self._errors)


@dataclass
class CommandEnvironment:
    """What a command gets to work with: the scene and the executer state."""

    scene: Any
    state: ExecuterState