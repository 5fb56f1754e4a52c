"""Error kinds raised by the resolve -> assemble -> invoke pipeline.

All of them are terminal: nothing in this package retries or swallows them.
"""

from __future__ import annotations


class JdepsRunnerError(Exception):
    """Base class for every error this package raises on purpose."""


class ExecutableNotFound(JdepsRunnerError):
    """Every discovery strategy was exhausted without finding a regular file."""

    def __init__(self, message: str, attempted: str | None = None):
        super().__init__(message)
        self.attempted = attempted


class ConfigurationError(JdepsRunnerError):
    """A required environment or override value is missing or invalid."""


class LaunchError(JdepsRunnerError):
    """The process could not be started at all."""

    def __init__(self, message: str, command_line: str):
        super().__init__(message)
        self.command_line = command_line


class ToolTimeout(JdepsRunnerError):
    def __init__(self, timeout_sec: float, command_line: str):
        super().__init__(f"jdeps did not finish within {timeout_sec}s. Command line was: {command_line}")
        self.timeout_sec = timeout_sec
        self.command_line = command_line


class ToolExecutionFailed(JdepsRunnerError):
    """jdeps ran and exited with a non-zero code."""

    def __init__(self, message: str, exit_code: int, stderr: str, command_line: str):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
        self.command_line = command_line
