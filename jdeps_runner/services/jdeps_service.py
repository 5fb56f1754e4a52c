from __future__ import annotations

import logging

from jdeps_runner.assembler.assembler import assemble_arguments
from jdeps_runner.assembler.grammar import JDK8, FlagGrammar
from jdeps_runner.discovery.resolver import ExecutableResolver
from jdeps_runner.domain.models import InvocationResult, Success
from jdeps_runner.domain.schemas import InvocationConfig
from jdeps_runner.services.invoker import ProcessInvoker
from jdeps_runner.services.report_sink import ReportSink

logger = logging.getLogger(__name__)

REPORT_TITLE = "JDeps report"


class JdepsService:
    """
    Orchestrates: resolve jdeps → assemble arguments → invoke → classify.
    """

    def __init__(
        self,
        resolver: ExecutableResolver,
        invoker: ProcessInvoker,
        grammar: FlagGrammar = JDK8,
        sink: ReportSink | None = None,
    ):
        self.resolver = resolver
        self.invoker = invoker
        self.grammar = grammar
        self.sink = sink

    def arguments(self, config: InvocationConfig) -> list[str]:
        return assemble_arguments(config, self.grammar)

    def run(self, config: InvocationConfig) -> InvocationResult:
        # Resolved on every run: JAVA_HOME or the toolchain may have changed
        location = self.resolver.resolve()
        argv = self.arguments(config)

        logger.info("Running jdeps from %s ...", location, extra={"tool": "jdeps", "source": location.source})
        result = self.invoker.invoke(location, argv)

        if isinstance(result, Success) and self.sink is not None:
            self.sink.accept(REPORT_TITLE, result.stdout)
        return result

    def run_or_raise(self, config: InvocationConfig) -> str:
        """Like ``run`` but raises ToolExecutionFailed instead of returning a Failure."""
        result = self.run(config)
        if not result.ok:
            result.raise_error()
        return result.stdout
