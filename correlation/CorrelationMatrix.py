# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-25
# Description: CorrelationMatrix
# -----------------------------------------------------------------------------
from typing import Sequence

import numpy as np

from utility.errors import EmbeddingDimensionError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

Vector = Sequence[float]


def _as_matrix(vectors: Sequence[Vector], name: str) -> np.ndarray:
    if len(vectors) == 0:
        return np.empty((0, 0), dtype=np.float64)

    dims = {len(v) for v in vectors}
    if len(dims) > 1:
        raise EmbeddingDimensionError(f"{name} contains vectors of differing dimensions: {sorted(dims)}")

    return np.asarray(vectors, dtype=np.float64)


def cosine_similarity(a: Vector, b: Vector) -> float:
    """
    dot(a, b) / (|a| * |b|).

    Zero-length (all-zero) vectors have no direction; their similarity is 0.0.
    """
    if len(a) != len(b):
        raise EmbeddingDimensionError(f"Cannot compare vectors of dimension {len(a)} and {len(b)}")

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    denom = np.linalg.norm(va) * np.linalg.norm(vb)
    if denom == 0.0:
        return 0.0
    return float(np.dot(va, vb) / denom)


def compute_correlation_matrix(vectors1: Sequence[Vector], vectors2: Sequence[Vector]) -> np.ndarray:
    """
    All-pairs cosine similarity.

    Returns an array of shape (len(vectors1), len(vectors2)) where
    cell [i, j] == cosine_similarity(vectors1[i], vectors2[j]).
    Passing the same set twice gives a symmetric matrix with ~1.0 on the diagonal.
    """
    m1 = _as_matrix(vectors1, "vectors1")
    m2 = m1 if vectors2 is vectors1 else _as_matrix(vectors2, "vectors2")

    if m1.shape[0] == 0 or m2.shape[0] == 0:
        return np.zeros((len(vectors1), len(vectors2)), dtype=np.float64)

    if m1.shape[1] != m2.shape[1]:
        raise EmbeddingDimensionError(
            f"Embedding dimensions differ between inputs: {m1.shape[1]} vs {m2.shape[1]}"
        )

    norms1 = np.linalg.norm(m1, axis=1)
    norms2 = np.linalg.norm(m2, axis=1)

    zero_rows = int((norms1 == 0).sum())
    zero_cols = int((norms2 == 0).sum())
    if zero_rows or zero_cols:
        logger.warning(
            "Found %d all-zero row vector(s) and %d all-zero column vector(s); their similarities are set to 0.0",
            zero_rows,
            zero_cols,
        )

    # Divide by 1 where a norm is 0; the dot product is 0 there anyway
    denom = np.outer(norms1, norms2)
    denom[denom == 0] = 1.0

    matrix = (m1 @ m2.T) / denom
    return np.clip(matrix, -1.0, 1.0)
