from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ReportSink(ABC):
    """Receives the finished jdeps output; rendering is up to the sink."""

    @abstractmethod
    def accept(self, title: str, text: str) -> None: ...


class FileReportSink(ReportSink):
    def __init__(self, reports_dir: Path, filename: str = "jdeps.txt"):
        self.reports_dir = reports_dir
        self.filename = filename

    @property
    def artifact(self) -> Path:
        return self.reports_dir / self.filename

    def accept(self, title: str, text: str) -> None:
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        # Title line, then the output verbatim
        self.artifact.write_text(f"{title}\n\n{text}\n", encoding="utf-8")


class MemoryReportSink(ReportSink):
    def __init__(self) -> None:
        self.reports: list[tuple[str, str]] = []

    def accept(self, title: str, text: str) -> None:
        self.reports.append((title, text))
