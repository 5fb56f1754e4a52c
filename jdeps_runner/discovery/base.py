from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

from jdeps_runner.core.errors import ExecutableNotFound

WINDOWS_SUFFIX = ".exe"


def is_windows() -> bool:
    return os.name == "nt"


def tool_command(tool: str, windows: bool) -> str:
    """Platform file name of a JDK tool, e.g. ``jdeps`` or ``jdeps.exe``."""
    return tool + (WINDOWS_SUFFIX if windows else "")


def validate_explicit(raw: str, command: str, windows: bool, attempts: list[Path]) -> Path:
    """Validate a path or directory the caller named explicitly.

    A directory is searched for ``command``; a bare file name gets the
    Windows executable suffix on Windows. Anything that is not a regular
    file afterwards is fatal.
    """
    exe = Path(raw)
    if exe.is_dir():
        exe = exe / command

    if windows and "." not in exe.name:
        exe = exe.with_name(exe.name + WINDOWS_SUFFIX)

    attempts.append(exe)
    if not exe.is_file():
        raise ExecutableNotFound(f"The jdeps executable '{exe}' doesn't exist or is not a file.", attempted=str(exe))
    return exe.absolute()


def probe_home(home: Path, command: str, attempts: list[Path]) -> Path | None:
    """Return ``<home>/bin/<command>`` if it is a regular file."""
    bin_dir = home / "bin"
    candidate = bin_dir / command
    attempts.append(candidate)
    if bin_dir.is_dir() and candidate.is_file():
        return candidate
    return None


class ToolDiscovery(ABC):
    """One way of finding the jdeps executable.

    ``locate`` returns a path to stop the search, ``None`` to let the next
    strategy try, or raises when the failure is terminal.
    """

    @abstractmethod
    def source(self) -> str: ...

    @abstractmethod
    def locate(self, command: str, attempts: list[Path]) -> Path | None: ...
