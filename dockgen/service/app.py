"""FastAPI application entrypoint for dockgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import NoLanguageDetected
from ..models import GeneratedArtifact, GenerateOutcome
from ..orchestrator import Orchestrator

_T = TypeVar("_T")


class DetectRequest(BaseModel):
    path: str


class LanguageReport(BaseModel):
    name: str
    dependencies: List[str]


class DetectResponse(BaseModel):
    languages: List[LanguageReport]


class GenerateRequest(BaseModel):
    path: str
    dry_run: bool = False


class GenerateResponse(BaseModel):
    dockerfile_path: str
    content: str
    written: bool
    stages: List[LanguageReport]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def _reports(artifact: GeneratedArtifact) -> List[LanguageReport]:
    return [
        LanguageReport(name=stage.language, dependencies=stage.dependencies)
        for stage in artifact.stages
    ]


async def _run_blocking(func: Callable[[], _T]) -> _T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing dockgen operations."""

    app = FastAPI(title="dockgen service", version="0.1.0")

    async def get_orchestrator() -> Orchestrator:
        # A fresh orchestrator per request keeps handler state out of the picture.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/detect", response_model=DetectResponse)
    async def detect(
        payload: DetectRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> DetectResponse:
        artifact = await _run_blocking(lambda: orchestrator.resolve(payload.path))
        return DetectResponse(languages=_reports(artifact))

    @app.post("/generate", response_model=GenerateResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerateResponse:
        outcome: GenerateOutcome = await _run_blocking(
            lambda: orchestrator.run(payload.path, dry_run=payload.dry_run)
        )
        return GenerateResponse(
            dockerfile_path=str(outcome.path),
            content=outcome.artifact.content,
            written=outcome.written,
            stages=_reports(outcome.artifact),
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(PermissionError)
    async def permission_error_handler(_: Any, exc: PermissionError) -> JSONResponse:
        return JSONResponse(status_code=403, content={"detail": str(exc)})

    @app.exception_handler(OSError)
    async def os_error_handler(_: Any, exc: OSError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(NoLanguageDetected)
    async def no_language_handler(_: Any, exc: NoLanguageDetected) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(_: Any, exc: RuntimeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
