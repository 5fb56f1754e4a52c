"""Executable resolver: the ordered list of discovery strategies.

Usage::

    resolver = ExecutableResolver(override="/opt/jdk/bin")
    location = resolver.resolve()      # ToolLocation(path=..., source="override")

Order: toolchain, user override, running Java installation, ``JAVA_HOME``.
The first strategy that returns a path wins; a strategy that raises ends
the search.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from jdeps_runner.core.errors import ExecutableNotFound
from jdeps_runner.domain.models import ToolLocation

from .base import ToolDiscovery, is_windows, tool_command
from .java_home import LOOKUP, JavaHomeDiscovery, RuntimeHomeDiscovery
from .override import OverrideDiscovery
from .toolchain import Toolchain, ToolchainDiscovery

logger = logging.getLogger(__name__)


class ExecutableResolver:
    def __init__(
        self,
        toolchain: Toolchain | None = None,
        override: str | Path | None = None,
        runtime_home: Path | None | object = LOOKUP,
        env: Mapping[str, str] | None = None,
        tool: str = "jdeps",
        windows: bool | None = None,
    ):
        self.tool = tool
        self.windows = is_windows() if windows is None else windows
        self.strategies: list[ToolDiscovery] = [
            ToolchainDiscovery(toolchain, tool, self.windows),
            OverrideDiscovery(override, self.windows),
            RuntimeHomeDiscovery(runtime_home),
            JavaHomeDiscovery(env),
        ]

    @property
    def command(self) -> str:
        return tool_command(self.tool, self.windows)

    def resolve(self) -> ToolLocation:
        attempts: list[Path] = []
        for strategy in self.strategies:
            logger.debug("Trying %s discovery for %s", strategy.source(), self.command)
            found = strategy.locate(self.command, attempts)
            if found is not None:
                logger.debug(
                    "Resolved %s to %s",
                    self.command,
                    found,
                    extra={"tool": self.tool, "source": strategy.source()},
                )
                return ToolLocation(path=Path(found).absolute(), source=strategy.source())

        last = attempts[-1] if attempts else None
        raise ExecutableNotFound(
            f"The jdeps executable '{last}' doesn't exist or is not a file. "
            "Verify the JAVA_HOME environment variable.",
            attempted=str(last) if last else None,
        )
