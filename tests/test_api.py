"""Tests for the HTTP surface."""

from conftest import posix_only
from jdeps_runner.core.config import settings


def test_health_reports_healthy(client):
    res = client.get("/health")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_openapi_has_tags_and_summaries(client):
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "jdeps runner"
    tags = {t["name"] for t in schema.get("tags", [])}
    assert {"jdeps", "health"} <= tags
    for path, methods in schema["paths"].items():
        for method, details in methods.items():
            assert "summary" in details, f"{method.upper()} {path} missing summary"


def test_arguments_endpoint(client):
    r = client.post("/api/jdeps/arguments", json={"destination": "classes", "packages": ["a.b", "c.d"]})
    assert r.status_code == 200
    assert r.json()["arguments"] == ["-package", "a.b", "-package", "c.d", "classes"]


def test_arguments_endpoint_rejects_packages_with_regex(client):
    r = client.post("/api/jdeps/arguments", json={"destination": "classes", "packages": ["a"], "regex": "b"})
    assert r.status_code == 422


def test_executable_endpoint(client, jdk_home, monkeypatch):
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", str(jdk_home / "bin"))
    r = client.get("/api/jdeps/executable")
    assert r.status_code == 200
    assert r.json()["source"] == "override"
    assert r.json()["path"].endswith("jdeps") or r.json()["path"].endswith("jdeps.exe")


def test_executable_endpoint_not_found(client, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", str(tmp_path / "missing"))
    r = client.get("/api/jdeps/executable")
    assert r.status_code == 404


@posix_only
def test_run_endpoint_success(client, jdk_home, classes_dir, monkeypatch):
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", str(jdk_home / "bin"))
    r = client.post("/api/jdeps/run", json={"destination": str(classes_dir), "summary": True})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["stdout"] == f"jdeps -summary {classes_dir}"


@posix_only
def test_run_endpoint_failure_is_reported(client, failing_jdeps, classes_dir, monkeypatch):
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", str(failing_jdeps))
    r = client.post("/api/jdeps/run", json={"destination": str(classes_dir)})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is False
    assert body["exit_code"] == 3
    assert "Exit code: 3" in body["message"]
