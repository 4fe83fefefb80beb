"""FastAPI application for the clause analysis engine.

This module exposes the analysis pipeline over HTTP and owns the
validation and history collaborators the engine itself leaves out.

Usage (from project root, after installing fastapi and uvicorn):

    uvicorn clause_analysis.api.app:app --reload

Then POST a JSON body such as {"clause": "...", "with_rewrite": true} to
/api/analyze.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from ..exceptions import ClauseValidationError
from ..parsers.serialization import AnalysisSerializer
from ..pipeline import ClauseAnalysisPipeline, PipelineConfig
from ..review.history import AnalysisHistory
from .validation import validate_clause


logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    """Body of an analysis request."""
    clause: str = Field(..., description="Text of a single legal clause")
    with_rewrite: bool = Field(False, description="Also return a rewrite and diff")


def _get_enable_cache_from_env() -> bool:
    """Determine whether to enable the result cache based on environment.

    Uses CLAUSE_ANALYSIS_ENABLE_CACHE environment variable. Accepted truthy
    values: "1", "true", "yes", "y" (case-insensitive). If not set, defaults
    to True.
    """
    value = os.getenv("CLAUSE_ANALYSIS_ENABLE_CACHE")
    if value is None:
        return True
    return value.strip().lower() in {"1", "true", "yes", "y"}


def _pipeline_from_env() -> ClauseAnalysisPipeline:
    config = PipelineConfig(
        enable_caching=_get_enable_cache_from_env(),
        config_dir=os.getenv("CLAUSE_ANALYSIS_CONFIG_DIR"),
    )
    return ClauseAnalysisPipeline(config=config)


def create_app(
    pipeline: Optional[ClauseAnalysisPipeline] = None,
    history: Optional[AnalysisHistory] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        pipeline: Pipeline to serve; built from the environment if None.
        history: History buffer; sized from the pipeline settings if None.
    """
    app = FastAPI(title="Clause Analysis API", version="0.1.0")

    pipeline = pipeline if pipeline is not None else _pipeline_from_env()
    app.state.pipeline = pipeline
    if history is None:
        history = AnalysisHistory(pipeline.settings.max_history_items)
    app.state.history = history

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "service": "clause-analysis-api", "version": "0.1.0"}

    @app.post("/api/analyze")
    def analyze_clause(body: AnalyzeRequest, request: Request):
        """
        Analyse a clause.

        Validates the clause, runs the pipeline, records the result in the
        history and returns the serialized result.
        """
        state = request.app.state
        try:
            clause = validate_clause(body.clause, state.pipeline.settings.max_clause_length)
        except ClauseValidationError as e:
            logger.info(f"Rejected clause: {e}")
            raise HTTPException(status_code=422, detail=e.to_dict())

        result = state.pipeline.analyze(clause, with_rewrite=body.with_rewrite)
        state.history.add(result)
        return AnalysisSerializer.to_dict(result)

    @app.get("/api/cache/stats")
    def get_cache_stats(request: Request):
        """Result cache counters."""
        return request.app.state.pipeline.cache_stats().to_dict()

    @app.get("/api/history")
    def get_history(request: Request):
        """Recent analyses, newest first."""
        entries = request.app.state.history.entries()
        return {
            "count": len(entries),
            "max_items": request.app.state.history.max_items,
            "entries": [entry.to_dict() for entry in entries],
        }

    @app.get("/api/history/export")
    def export_history(request: Request) -> Response:
        """Download the history as a JSON file."""
        filename = f"clause_history_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        return Response(
            content=request.app.state.history.export_json(),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.delete("/api/history")
    def clear_history(request: Request):
        """Remove all history entries."""
        request.app.state.history.clear()
        return {"cleared": True}

    return app


app = create_app()
