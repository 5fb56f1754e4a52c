"""Build-system toolchains: a mapping from a tool name to an executable path.

The build integration that selects a toolchain lives outside this package;
it hands over one of these objects (or nothing at all).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping

from .base import ToolDiscovery, is_windows, tool_command, validate_explicit

logger = logging.getLogger(__name__)


class Toolchain(ABC):
    @abstractmethod
    def find_tool(self, name: str) -> str | None: ...


class JdkToolchain(Toolchain):
    """A JDK installation selected by the build; tools live in ``<home>/bin``."""

    def __init__(self, home: str | Path, windows: bool | None = None):
        self.home = Path(home)
        self._windows = is_windows() if windows is None else windows

    def find_tool(self, name: str) -> str | None:
        candidate = self.home / "bin" / tool_command(name, self._windows)
        if candidate.is_file():
            return str(candidate)
        return None

    def __str__(self) -> str:
        return f"JDK[{self.home}]"


class MappingToolchain(Toolchain):
    def __init__(self, tools: Mapping[str, str]):
        self._tools = dict(tools)

    def find_tool(self, name: str) -> str | None:
        return self._tools.get(name)

    def __str__(self) -> str:
        return f"Mapping{sorted(self._tools)}"


class ToolchainDiscovery(ToolDiscovery):
    """Authoritative when the toolchain knows the tool; silent otherwise."""

    def __init__(self, toolchain: Toolchain | None, tool: str, windows: bool):
        self.toolchain = toolchain
        self.tool = tool
        self.windows = windows

    def source(self) -> str:
        return "toolchain"

    def locate(self, command: str, attempts: list[Path]) -> Path | None:
        if self.toolchain is None:
            return None

        logger.info("Toolchain in jdeps-runner: %s", self.toolchain)
        found = self.toolchain.find_tool(self.tool)
        if not found:
            return None
        return validate_explicit(found, command, self.windows, attempts)
