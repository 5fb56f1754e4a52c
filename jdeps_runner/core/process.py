from __future__ import annotations

import os
import shlex
import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Sequence


@dataclass
class CmdResult:
    exit_code: int
    stdout: str
    stderr: str


class StreamConsumer(threading.Thread):
    """Drains one pipe into a buffer until EOF."""

    def __init__(self, stream: IO[str], name: str):
        super().__init__(name=name, daemon=True)
        self._stream = stream
        self._chunks: list[str] = []

    def run(self) -> None:
        with self._stream:
            for chunk in iter(lambda: self._stream.read(8192), ""):
                self._chunks.append(chunk)

    @property
    def output(self) -> str:
        return "".join(self._chunks)


def render_command_line(cmd: Sequence[str]) -> str:
    """Render argv the way a user would type it back into a shell."""
    if os.name == "nt":
        return subprocess.list2cmdline(list(cmd))
    return shlex.join(list(cmd))


def run_streaming(
    cmd: Sequence[str],
    cwd: Path | None = None,
    timeout_sec: float | None = None,
) -> CmdResult:
    """Run cmd, capturing stdout and stderr on two reader threads.

    Both pipes are drained concurrently so a child filling one pipe never
    blocks while we wait on the other. ``timeout_sec=None`` waits forever.
    OSError from the spawn propagates; subprocess.TimeoutExpired is raised
    after the child has been killed and the readers joined.
    """
    p = subprocess.Popen(
        list(cmd),
        cwd=str(cwd) if cwd else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    out = StreamConsumer(p.stdout, "jdeps-stdout")
    err = StreamConsumer(p.stderr, "jdeps-stderr")
    out.start()
    err.start()

    try:
        exit_code = p.wait(timeout=timeout_sec)
    except subprocess.TimeoutExpired:
        p.kill()
        p.wait()
        raise
    finally:
        out.join()
        err.join()

    return CmdResult(exit_code, out.output, err.output)
