"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Load .env from the project root or the current directory
_project_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_project_root / ".env")
load_dotenv()

from probuild.data.catalog import ELEMENT_FIELDS, ELEMENT_PREFIXES, default_inputs
from probuild.engine import ENGINE_VERSION
from probuild.exceptions import ProBuildError
from probuild.models.enums import ElementType
from probuild.models.estimate import SavedItem  # noqa: TCH001 (FastAPI resolves at runtime)
from probuild.models.inputs import RawValue  # noqa: TCH001

if TYPE_CHECKING:
    from probuild.engine import EstimationEngine

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate."""

    element_type: ElementType
    inputs: dict[str, RawValue] = Field(default_factory=dict)


class GrandTotalRequest(BaseModel):
    """Body of POST /api/grand-total."""

    items: list[SavedItem] = Field(default_factory=list)


def create_app(*, engine: EstimationEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests or
        regional rates). If not provided, one is created from environment
        variables on first request.
    """
    app = FastAPI(title="ProBuild Estimator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.engine = engine

    def _get_engine() -> EstimationEngine:
        eng: EstimationEngine | None = app.state.engine
        if eng is not None:
            return eng
        from probuild.api.deps import create_engine

        eng = create_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/elements
    # ------------------------------------------------------------------

    @app.get("/api/elements")
    def list_elements() -> list[dict[str, Any]]:
        return [
            {
                "element_type": element_type.value,
                "prefix": ELEMENT_PREFIXES[element_type],
                "fields": [f.model_dump(mode="json") for f in ELEMENT_FIELDS[element_type]],
            }
            for element_type in ElementType
        ]

    # ------------------------------------------------------------------
    # GET /api/elements/{element_type}/defaults
    # ------------------------------------------------------------------

    @app.get("/api/elements/{element_type}/defaults")
    def element_defaults(element_type: str) -> dict[str, Any]:
        try:
            resolved = ElementType(element_type.upper())
        except ValueError as exc:
            raise HTTPException(
                status_code=404,
                detail=f"Unknown element type '{element_type}'",
            ) from exc
        return default_inputs(resolved)

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        eng = _get_engine()
        try:
            result = eng.calculate_estimation(request.element_type, request.inputs)
        except ProBuildError as exc:
            logger.exception("Estimation failed for %s", request.element_type)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/grand-total
    # ------------------------------------------------------------------

    @app.post("/api/grand-total")
    def grand_total(request: GrandTotalRequest) -> dict[str, Any]:
        result = _get_engine().calculate_grand_total(request.items)
        return {
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/config
    # ------------------------------------------------------------------

    @app.get("/api/config")
    def config() -> dict[str, Any]:
        return _get_engine().config.model_dump(mode="json")

    return app
