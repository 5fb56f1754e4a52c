from __future__ import annotations

from pathlib import Path

from .base import ToolDiscovery, validate_explicit


class OverrideDiscovery(ToolDiscovery):
    """User-supplied jdeps path or directory. Terminal once configured."""

    def __init__(self, override: str | Path | None, windows: bool):
        self.override = str(override) if override else None
        self.windows = windows

    def source(self) -> str:
        return "override"

    def locate(self, command: str, attempts: list[Path]) -> Path | None:
        if not self.override:
            return None
        return validate_explicit(self.override, command, self.windows, attempts)
