from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FilterMode(str, Enum):
    PACKAGE = "package"
    ARCHIVE = "archive"
    NONE = "none"


class InvocationConfig(BaseModel):
    """Every jdeps option this runner knows about, each independently optional.

    ``classpath`` and ``packages`` are emitted in the order given; callers
    holding unordered collections must sort them first.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    summary: bool = Field(False, description="Print dependency summary only.")
    verbose: bool = Field(False, description="Print all class level dependencies.")
    verbose_level: str | None = Field(
        None,
        description='Print package-level or class-level dependencies ("package" or "class").',
    )
    api_only: bool = Field(False, description="Restrict analysis to APIs.")
    jdk_internals: bool = Field(False, description="Find class-level dependencies on JDK internal APIs.")
    profile: bool = Field(False, description="Show profile or the file containing a package.")
    recursive: bool = Field(False, description="Recursively traverse all dependencies.")
    print_version: bool = Field(False, description="Print jdeps version information.")

    packages: list[str] = Field(default_factory=list, description="Restrict analysis to these packages.")
    regex: str | None = Field(None, description="Restrict analysis to packages matching pattern.")
    include: str | None = Field(None, description="Restrict analysis to classes matching pattern.")
    filter_pattern: str | None = Field(None, description="Filter dependences matching pattern.")
    # Raw string on purpose: unknown modes are dropped by the assembler, not rejected here
    filter_mode: str | None = Field(None, description='One of "package", "archive" or "none".')

    classpath: list[Path] = Field(default_factory=list, description="Ordered classpath entries.")
    dot_output: Path | None = Field(None, description="Directory for DOT graph output.")
    destination: Path = Field(..., description="Classes directory or archive to analyze.")

    @model_validator(mode="after")
    def _packages_and_regex_are_exclusive(self) -> "InvocationConfig":
        if self.packages and self.regex:
            raise ValueError('"packages" and "regex" are exclusive')
        return self
