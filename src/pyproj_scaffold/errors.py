"""Custom exception types raised by the scaffolder."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ScaffoldError(RuntimeError):
    """Base class for every failure the command line reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ScaffoldIOError(ScaffoldError):
    """Raised when a directory or file cannot be created, written or removed."""

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class ProcessError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        returncode: int | None,
        message: str | None = None,
    ) -> None:
        self.command = command
        self.args_list = tuple(args)
        self.returncode = returncode
        if message is None:
            message = f"command `{self.command_line}` failed with exit status {returncode}"
        super().__init__(message)

    @property
    def command_line(self) -> str:
        return " ".join([self.command, *self.args_list])


class CommandNotFoundError(ProcessError):
    """Raised when an external command cannot be located or started."""

    def __init__(self, command: str, args: Sequence[str], reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(
            command,
            args,
            None,
            message=f"failed to run `{' '.join([command, *args])}`{detail}",
        )


class ConfirmationRequiredError(ScaffoldError):
    """Raised when a destructive action is attempted without confirmation."""


__all__ = [
    "CommandNotFoundError",
    "ConfirmationRequiredError",
    "ProcessError",
    "ScaffoldError",
    "ScaffoldIOError",
]
