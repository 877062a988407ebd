# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: dependencies.py
# -----------------------------------------------------------------------------
from pathlib import Path

from fastapi import Request

from visualization.CorrelationPayload import VisualizationPayload


def get_payload(request: Request) -> VisualizationPayload:
    # built once at startup by create_app(); read-only afterwards
    return request.app.state.payload


def get_template_path(request: Request) -> Path:
    return request.app.state.template_path
