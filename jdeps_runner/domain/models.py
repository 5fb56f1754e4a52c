from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

from jdeps_runner.core.errors import ToolExecutionFailed

DiscoverySource = Literal["toolchain", "override", "runtime", "java_home"]


@dataclass(frozen=True)
class ToolLocation:
    path: Path
    source: DiscoverySource

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class Success:
    stdout: str

    ok: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    exit_code: int
    stderr: str
    command_line: str

    ok: Literal[False] = False

    @property
    def message(self) -> str:
        msg = f"Exit code: {self.exit_code}"
        if self.stderr:
            msg += f" - {self.stderr.strip()}"
        msg += f"\nCommand line was: {self.command_line}"
        return msg

    def raise_error(self) -> None:
        raise ToolExecutionFailed(self.message, self.exit_code, self.stderr, self.command_line)


InvocationResult = Union[Success, Failure]
