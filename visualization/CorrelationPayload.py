# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Updated: 2026-10-16
# Description: CorrelationPayload
# -----------------------------------------------------------------------------
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from utility.assets import is_image_reference

IMAGE_PLACEHOLDER = "🖼️"
TRUNCATION_MARKER = "…"


def truncate_label(text: str, max_len: int = 32) -> str:
    """Short axis label: a glyph for images, otherwise text cut to max_len characters."""
    if is_image_reference(text):
        return IMAGE_PLACEHOLDER
    return text[:max_len] + TRUNCATION_MARKER if len(text) > max_len else text


@dataclass(frozen=True)
class VisualizationPayload:
    """
    Everything the correlation page needs, built once and serialized into the template.
    Field names on the JSON side follow the page's JavaScript (camelCase).
    """

    matrix: Tuple[Tuple[float, ...], ...]
    row_labels: Tuple[str, ...]
    col_labels: Tuple[str, ...]
    row_full: Tuple[str, ...]
    col_full: Tuple[str, ...]
    row_file: str
    col_file: str

    @classmethod
    def build(
            cls,
            matrix: np.ndarray | Sequence[Sequence[float]],
            row_chunks: Sequence[str],
            col_chunks: Sequence[str],
            row_file: str | Path,
            col_file: Optional[str | Path] = None,
            *,
            max_label_len: int = 32,
    ) -> "VisualizationPayload":
        rows = np.asarray(matrix, dtype=np.float64)
        expected = (len(row_chunks), len(col_chunks))
        if rows.size == 0 and 0 in expected:
            # [] and np.zeros((0, n)) both describe an empty heatmap
            rows = rows.reshape(expected)
        elif rows.shape != expected:
            raise ValueError(
                f"Matrix shape {rows.shape} does not match {expected[0]} row and {expected[1]} column labels"
            )


        return cls(
            matrix=tuple(tuple(float(v) for v in row) for row in rows),
            row_labels=tuple(truncate_label(c, max_label_len) for c in row_chunks),
            col_labels=tuple(truncate_label(c, max_label_len) for c in col_chunks),
            row_full=tuple(row_chunks),
            col_full=tuple(col_chunks),
            row_file=Path(row_file).name,
            col_file=Path(col_file if col_file else row_file).name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matrix": [list(row) for row in self.matrix],
            "rowLabels": list(self.row_labels),
            "colLabels": list(self.col_labels),
            "rowFull": list(self.row_full),
            "colFull": list(self.col_full),
            "rowFile": self.row_file,
            "colFile": self.col_file,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.row_full), len(self.col_full)
