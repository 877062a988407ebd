# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: correlation router
# -----------------------------------------------------------------------------
import logging
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from api.dependencies import get_payload, get_template_path
from visualization.CorrelationPayload import VisualizationPayload
from visualization.HtmlRenderer import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["correlation"])


@router.get("/", response_class=HTMLResponse)
def get_correlation_page(
    payload: VisualizationPayload = Depends(get_payload),
    template_path: Path = Depends(get_template_path),
) -> HTMLResponse:
    rows, cols = payload.shape
    logger.info("GET / called (matrix %d x %d)", rows, cols)
    return HTMLResponse(render_page(payload, template_path))
