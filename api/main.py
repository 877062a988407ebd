# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: main.py
# -----------------------------------------------------------------------------
from pathlib import Path

from fastapi import FastAPI

from api.routers import correlation
from visualization.CorrelationPayload import VisualizationPayload
from visualization.HtmlRenderer import DEFAULT_TEMPLATE


def create_app(payload: VisualizationPayload, template_path: str | Path = DEFAULT_TEMPLATE) -> FastAPI:
    """Single-page app serving the correlation heatmap for one precomputed payload."""
    app = FastAPI(title="Embedding Correlation", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.payload = payload
    app.state.template_path = Path(template_path)
    app.include_router(correlation.router)
    return app
