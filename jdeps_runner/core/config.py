import os

from pydantic import BaseModel

APP_VERSION = "0.1.0"


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return None
    return float(raw)


class Settings(BaseModel):
    # jdeps discovery
    JDEPS_EXECUTABLE: str | None = os.getenv("JDEPS_EXECUTABLE")
    JDEPS_TOOLCHAIN_JDK: str | None = os.getenv("JDEPS_TOOLCHAIN_JDK")

    # Argument grammar: "jdk8" (single-dash) or "jdk9" (GNU-style)
    JDEPS_FLAG_GRAMMAR: str = os.getenv("JDEPS_FLAG_GRAMMAR", "jdk8")

    # None waits for the process indefinitely
    JDEPS_TIMEOUT_SEC: float | None = _optional_float("JDEPS_TIMEOUT_SEC")

    # Where the file report sink writes captured output
    JDEPS_REPORT_DIR: str = os.getenv("JDEPS_REPORT_DIR", "reports")


settings = Settings()
