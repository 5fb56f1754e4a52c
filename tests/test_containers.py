from jdeps_runner.assembler.grammar import JDK8, JDK9
from jdeps_runner.core.config import settings
from jdeps_runner.core.containers import build_jdeps_service, build_toolchain


def test_build_jdeps_service_from_settings_copy(tmp_path):
    cfg = settings.model_copy(update={"JDEPS_FLAG_GRAMMAR": "jdk9", "JDEPS_REPORT_DIR": str(tmp_path / "out")})
    svc = build_jdeps_service(cfg, write_report=True)
    assert svc.grammar is JDK9
    assert svc.sink.artifact == tmp_path / "out" / "jdeps.txt"


def test_build_jdeps_service_defaults():
    svc = build_jdeps_service()
    assert svc.grammar is JDK8
    assert svc.sink is None
    assert svc.invoker.timeout_sec is None


def test_build_toolchain_only_when_configured(jdk_home):
    assert build_toolchain(settings) is None
    tc = build_toolchain(settings.model_copy(update={"JDEPS_TOOLCHAIN_JDK": str(jdk_home)}))
    assert tc.home == jdk_home
