"""Failure kinds raised while running a command.

Every kind is fatal to the caller; nothing here is retried. `to_dict()` is the
payload consumed by the formatters.
"""

from __future__ import annotations

from typing import Any, Optional

from build_command.core.types import ExitStatus


class CommandError(RuntimeError):
    """Base class for every failure of a command run."""

    kind = "CommandError"

    def __init__(self, message: str, command_line: str, output: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.command_line = command_line
        self.output = output

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "command": self.command_line,
            "output": self.output,
        }


class EmptyCommand(CommandError):
    kind = "EmptyCommand"

    def __init__(self, command_line: str) -> None:
        super().__init__("No command specified", command_line)


class SpawnFailure(CommandError):
    kind = "SpawnFailure"

    def __init__(self, command_line: str, os_error: OSError) -> None:
        super().__init__(
            f'Could not start command "{command_line}": {os_error}', command_line
        )
        self.os_error = os_error

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["os_error"] = str(self.os_error)
        return data


class StreamReadFailure(CommandError):
    """Reading stdout and/or stderr of the child failed while draining."""

    kind = "StreamReadFailure"

    def __init__(
        self,
        command_line: str,
        streams: tuple[str, ...],
        os_error: OSError,
        output: str = "",
    ) -> None:
        super().__init__(
            f"Failed to read {' and '.join(streams)} of \"{command_line}\": {os_error}",
            command_line,
            output,
        )
        self.streams = streams
        self.os_error = os_error

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["streams"] = list(self.streams)
        data["os_error"] = str(self.os_error)
        return data


class WaitFailure(CommandError):
    kind = "WaitFailure"

    def __init__(self, command_line: str, os_error: OSError) -> None:
        super().__init__(
            f'Failed to wait for command "{command_line}": {os_error}', command_line
        )
        self.os_error = os_error

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["os_error"] = str(self.os_error)
        return data


class CommandFailed(CommandError):
    """The child exited with a non-zero status or without an exit code."""

    kind = "CommandFailed"

    def __init__(self, command_line: str, status: ExitStatus, output: str) -> None:
        if status.code is not None:
            message = f'Command "{command_line}" failed with return value {status.code}'
        else:
            message = f'Command "{command_line}" failed with no return value'
        super().__init__(message, command_line, output)
        self.status = status

    @property
    def exit_code(self) -> Optional[int]:
        return self.status.code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["exit_code"] = self.status.code
        data["signal"] = self.status.signal
        return data
