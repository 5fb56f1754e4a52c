from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from jdeps_runner.core.containers import build_jdeps_service, build_resolver
from jdeps_runner.core.errors import ConfigurationError, ExecutableNotFound, LaunchError, ToolTimeout
from jdeps_runner.domain.schemas import InvocationConfig

router = APIRouter(prefix="/api/jdeps", tags=["jdeps"])


# ── Request / Response schemas ────────────────────────────────────
class ExecutableResponse(BaseModel):
    """Where jdeps was found and by which discovery strategy."""

    path: str = Field(..., description="Absolute path of the jdeps executable.")
    source: str = Field(..., description="toolchain, override, runtime or java_home.")


class ArgumentsResponse(BaseModel):
    arguments: list[str] = Field(..., description="Argument vector, executable excluded.")


class RunResponse(BaseModel):
    """Outcome of one jdeps run. A non-zero exit is reported, not raised."""

    ok: bool
    stdout: str | None = None
    exit_code: int | None = None
    stderr: str | None = None
    command_line: str | None = None
    message: str | None = None


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, ExecutableNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, ToolTimeout):
        return HTTPException(status_code=504, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))


# ── Endpoints ─────────────────────────────────────────────────────
@router.get(
    "/executable",
    response_model=ExecutableResponse,
    summary="Resolve the jdeps executable",
    response_description="Resolved path and discovery source",
)
def get_executable() -> dict[str, Any]:
    """Run executable discovery without invoking jdeps."""
    try:
        location = build_resolver().resolve()
    except (ExecutableNotFound, ConfigurationError) as e:
        raise _http_error(e) from e
    return {"path": str(location.path), "source": location.source}


@router.post(
    "/arguments",
    response_model=ArgumentsResponse,
    summary="Assemble jdeps arguments",
    response_description="The argument vector for this configuration",
)
def post_arguments(config: InvocationConfig) -> dict[str, Any]:
    """Show the command-line arguments a run would use. Does not touch the filesystem."""
    return {"arguments": build_jdeps_service().arguments(config)}


@router.post(
    "/run",
    response_model=RunResponse,
    summary="Run jdeps",
    response_description="Captured output or failure diagnostics",
)
def post_run(config: InvocationConfig) -> dict[str, Any]:
    """Resolve jdeps, run it with the given configuration and report the outcome.

    A non-zero exit code comes back with `ok: false`; errors finding or
    starting jdeps are HTTP errors.
    """
    try:
        result = build_jdeps_service().run(config)
    except (ExecutableNotFound, ConfigurationError, LaunchError, ToolTimeout) as e:
        raise _http_error(e) from e

    if result.ok:
        return {"ok": True, "stdout": result.stdout}
    return {
        "ok": False,
        "exit_code": result.exit_code,
        "stderr": result.stderr,
        "command_line": result.command_line,
        "message": result.message,
    }
