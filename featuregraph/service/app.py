"""FastAPI application entrypoint for featuregraph service mode."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from ..changelog import entry_from_dict
from ..orchestrator import AnalysisReport, Orchestrator
from ..render import SvgRenderer


class EntryPayload(BaseModel):
    day: str
    date: str = ""
    feature: str = ""
    description: str = ""
    filesModified: str = ""


class AnalyzeRequest(BaseModel):
    entries: List[EntryPayload] = Field(default_factory=list)
    width: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
    renderer: SvgRenderer | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing featuregraph analysis."""

    app = FastAPI(title="FeatureGraph Service", version="1.0.0")
    svg_renderer = renderer or SvgRenderer()

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    def _analyze(payload: AnalyzeRequest, orchestrator: Orchestrator) -> AnalysisReport:
        entries = [entry_from_dict(item.model_dump()) for item in payload.entries]
        return orchestrator.analyze_entries(entries, width=payload.width, height=payload.height)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze")
    async def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> Dict[str, Any]:
        return _analyze(payload, orchestrator).to_dict()

    @app.post("/render")
    async def render(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> Response:
        report = _analyze(payload, orchestrator)
        return Response(content=svg_renderer.render(report), media_type="image/svg+xml")

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(
        _: Any, exc: ValueError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install featuregraph[service]`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
