from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from jdeps_runner.core.errors import LaunchError, ToolTimeout
from jdeps_runner.core.process import render_command_line, run_streaming
from jdeps_runner.domain.models import Failure, InvocationResult, Success, ToolLocation

logger = logging.getLogger(__name__)


class ProcessInvoker:
    """Runs jdeps once and classifies the outcome. Never retries."""

    def __init__(self, timeout_sec: float | None = None, cwd: Path | None = None):
        self.timeout_sec = timeout_sec
        self.cwd = cwd

    def invoke(self, location: ToolLocation, argv: Sequence[str]) -> InvocationResult:
        cmd = [str(location.path), *argv]
        command_line = render_command_line(cmd)
        logger.debug("Executing %s", command_line, extra={"tool": "jdeps"})

        try:
            r = run_streaming(cmd, cwd=self.cwd, timeout_sec=self.timeout_sec)
        except subprocess.TimeoutExpired as e:
            raise ToolTimeout(self.timeout_sec, command_line) from e
        except OSError as e:
            raise LaunchError(f"Unable to execute jdeps command: {e}", command_line) from e

        if r.exit_code == 0:
            output = r.stdout.strip()
            if output:
                logger.info("\n%s", output, extra={"tool": "jdeps"})
            return Success(stdout=output)

        failure = Failure(exit_code=r.exit_code, stderr=r.stderr, command_line=command_line)
        logger.error("%s", failure.message, extra={"tool": "jdeps", "exit_code": r.exit_code})
        return failure
