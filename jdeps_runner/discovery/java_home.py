from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Mapping

from jdeps_runner.core.errors import ConfigurationError

from .base import ToolDiscovery, probe_home

logger = logging.getLogger(__name__)

JAVA_HOME_VAR = "JAVA_HOME"

LOOKUP = object()


def default_runtime_home() -> Path | None:
    """Installation root of the ``java`` launcher on PATH, symlinks resolved.

    ``/usr/lib/jvm/jdk-21/bin/java`` gives ``/usr/lib/jvm/jdk-21``.
    """
    java = shutil.which("java")
    if java is None:
        return None
    return Path(java).resolve().parent.parent


class RuntimeHomeDiscovery(ToolDiscovery):
    """Look next to the running Java installation.

    That root is either a full JDK or a JRE nested one level below one
    (``jdk/jre``), so its parent is probed too.
    """

    def __init__(self, runtime_home: Path | None | object = LOOKUP):
        # LOOKUP asks PATH on every locate(); None disables this strategy
        self.runtime_home = runtime_home

    def source(self) -> str:
        return "runtime"

    def locate(self, command: str, attempts: list[Path]) -> Path | None:
        home = default_runtime_home() if self.runtime_home is LOOKUP else self.runtime_home
        if home is None:
            return None

        home = Path(home)
        found = probe_home(home, command, attempts)
        if found is None:
            logger.debug("jdeps not in %s, trying parent", home)
            found = probe_home(home.parent, command, attempts)
        return found


class JavaHomeDiscovery(ToolDiscovery):
    """Last resort: ``$JAVA_HOME/bin``. The variable itself is mandatory here."""

    def __init__(self, env: Mapping[str, str] | None = None):
        self.env = os.environ if env is None else env

    def source(self) -> str:
        return "java_home"

    def locate(self, command: str, attempts: list[Path]) -> Path | None:
        java_home = self.env.get(JAVA_HOME_VAR)
        if not java_home:
            raise ConfigurationError(f"The environment variable {JAVA_HOME_VAR} is not correctly set.")

        home = Path(java_home)
        if not home.is_dir():
            raise ConfigurationError(
                f"The environment variable {JAVA_HOME_VAR}={java_home} doesn't exist or is not a valid directory."
            )
        return probe_home(home, command, attempts)
