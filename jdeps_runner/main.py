from __future__ import annotations

from fastapi import FastAPI

from jdeps_runner.core.config import APP_VERSION
from jdeps_runner.api.jdeps_routes import router as jdeps_router
from jdeps_runner.core.logging import setup_logging

setup_logging()

tags_metadata = [
    {"name": "jdeps", "description": "Resolve the jdeps executable, assemble its arguments and run it."},
    {"name": "health", "description": "Liveness probe for the service."},
]

app = FastAPI(
    title="jdeps runner",
    version=APP_VERSION,
    description="Runs the JDK dependency analyzer against compiled classes.",
    openapi_tags=tags_metadata,
)

app.include_router(jdeps_router)


@app.get("/health", tags=["health"], summary="Health check")
def health() -> dict[str, str]:
    return {"status": "healthy", "version": APP_VERSION}
