from __future__ import annotations

from pathlib import Path

from jdeps_runner.assembler.grammar import get_grammar
from jdeps_runner.core.config import Settings, settings
from jdeps_runner.discovery.resolver import ExecutableResolver
from jdeps_runner.discovery.toolchain import JdkToolchain, Toolchain
from jdeps_runner.services.invoker import ProcessInvoker
from jdeps_runner.services.jdeps_service import JdepsService
from jdeps_runner.services.report_sink import FileReportSink, ReportSink


def build_toolchain(cfg: Settings = settings) -> Toolchain | None:
    if not cfg.JDEPS_TOOLCHAIN_JDK:
        return None
    return JdkToolchain(cfg.JDEPS_TOOLCHAIN_JDK)


def build_resolver(cfg: Settings = settings) -> ExecutableResolver:
    return ExecutableResolver(toolchain=build_toolchain(cfg), override=cfg.JDEPS_EXECUTABLE)


def build_jdeps_service(cfg: Settings = settings, write_report: bool = False) -> JdepsService:
    """Wire a service from settings. A fresh resolver each call, nothing shared.

    Callers with their own overrides pass ``settings.model_copy(update=...)``.
    """
    sink: ReportSink | None = FileReportSink(Path(cfg.JDEPS_REPORT_DIR)) if write_report else None
    return JdepsService(
        resolver=build_resolver(cfg),
        invoker=ProcessInvoker(timeout_sec=cfg.JDEPS_TIMEOUT_SEC),
        grammar=get_grammar(cfg.JDEPS_FLAG_GRAMMAR),
        sink=sink,
    )
