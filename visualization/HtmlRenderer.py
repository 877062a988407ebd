# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: HtmlRenderer
# -----------------------------------------------------------------------------
from pathlib import Path

from visualization.CorrelationPayload import VisualizationPayload

DATA_PLACEHOLDER = "{{ DATA }}"
DEFAULT_TEMPLATE = Path(__file__).resolve().parent / "templates" / "correlation_d3.html"


def render_page(payload: VisualizationPayload, template_path: str | Path = DEFAULT_TEMPLATE) -> str:
    """
    Read the template from disk and inline the payload as JSON.
    Called per request; the template is not cached.
    """
    template = Path(template_path).read_text(encoding="utf-8")
    if DATA_PLACEHOLDER not in template:
        raise ValueError(f"Template {template_path} has no {DATA_PLACEHOLDER} placeholder")

    # "</" would close the surrounding <script> block if a chunk contains it
    data = payload.to_json().replace("</", "<\\/")
    return template.replace(DATA_PLACEHOLDER, data, 1)
