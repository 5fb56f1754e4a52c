import pytest

from conftest import posix_only
from jdeps_runner.assembler.grammar import JDK9
from jdeps_runner.core.errors import ExecutableNotFound, ToolExecutionFailed
from jdeps_runner.discovery.resolver import ExecutableResolver
from jdeps_runner.domain.schemas import InvocationConfig
from jdeps_runner.services.invoker import ProcessInvoker
from jdeps_runner.services.jdeps_service import REPORT_TITLE, JdepsService
from jdeps_runner.services.report_sink import MemoryReportSink


def _service(override, **kw) -> JdepsService:
    resolver = ExecutableResolver(override=override, runtime_home=None, env={}, windows=False)
    return JdepsService(resolver=resolver, invoker=ProcessInvoker(), **kw)


@posix_only
def test_run_success_feeds_sink(jdk_home, classes_dir):
    sink = MemoryReportSink()
    svc = _service(jdk_home / "bin", sink=sink)

    result = svc.run(InvocationConfig(summary=True, destination=classes_dir))

    assert result.ok
    assert result.stdout == f"jdeps -summary {classes_dir}"
    assert sink.reports == [(REPORT_TITLE, result.stdout)]


@posix_only
def test_run_failure_skips_sink(failing_jdeps, classes_dir):
    sink = MemoryReportSink()
    result = _service(failing_jdeps, sink=sink).run(InvocationConfig(destination=classes_dir))
    assert not result.ok
    assert result.exit_code == 3
    assert sink.reports == []


@posix_only
def test_run_or_raise(failing_jdeps, classes_dir):
    with pytest.raises(ToolExecutionFailed, match="Exit code: 3"):
        _service(failing_jdeps).run_or_raise(InvocationConfig(destination=classes_dir))


@posix_only
def test_grammar_is_used(jdk_home, classes_dir):
    svc = _service(jdk_home / "bin", grammar=JDK9)
    out = svc.run_or_raise(InvocationConfig(recursive=True, destination=classes_dir))
    assert out == f"jdeps --recursive {classes_dir}"


def test_resolution_errors_propagate(tmp_path, classes_dir):
    with pytest.raises(ExecutableNotFound):
        _service(tmp_path / "nothing").run(InvocationConfig(destination=classes_dir))


def test_arguments_do_not_resolve(tmp_path, classes_dir):
    svc = _service(tmp_path / "nothing")
    assert svc.arguments(InvocationConfig(summary=True, destination=classes_dir)) == ["-summary", str(classes_dir)]
