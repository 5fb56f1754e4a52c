import os
import stat
import sys
from pathlib import Path

import pytest

from jdeps_runner.core.config import settings

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="fake jdeps is a POSIX shell script")


def write_script(path: Path, body: str, executable: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    if executable:
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Never pick up the developer's jdeps configuration."""
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", None)
    monkeypatch.setattr(settings, "JDEPS_TOOLCHAIN_JDK", None)
    monkeypatch.setattr(settings, "JDEPS_FLAG_GRAMMAR", "jdk8")
    monkeypatch.setattr(settings, "JDEPS_TIMEOUT_SEC", None)
    monkeypatch.setattr(settings, "JDEPS_REPORT_DIR", str(tmp_path / "reports"))


@pytest.fixture
def jdk_home(tmp_path) -> Path:
    """A fake JDK whose bin/jdeps echoes its arguments."""
    home = tmp_path / "jdk"
    write_script(home / "bin" / "jdeps", 'echo "jdeps $*"\n')
    return home


@pytest.fixture
def failing_jdeps(tmp_path) -> Path:
    return write_script(tmp_path / "failing" / "jdeps", 'echo "Error: no classes" >&2\nexit 3\n')


@pytest.fixture
def classes_dir(tmp_path) -> Path:
    d = tmp_path / "target" / "classes"
    d.mkdir(parents=True)
    return d


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from jdeps_runner.main import app

    return TestClient(app)


@pytest.fixture
def no_java_home(monkeypatch):
    monkeypatch.delenv("JAVA_HOME", raising=False)
    return os.environ
