# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-27
# Description: CorrelationService
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from correlation.CorrelationMatrix import compute_correlation_matrix
from ingestion.EmbeddingFileLoader import EmbeddingFileLoader
from utility.logging_utils import get_class_logger
from visualization.CorrelationPayload import VisualizationPayload


@dataclass
class CorrelationService:
    """
    Load one or two embedding files, correlate them and build the page payload.
    With a single file the set is compared against itself.
    """

    loader: EmbeddingFileLoader = field(default_factory=EmbeddingFileLoader)
    max_label_len: int = 32
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def build_payload(
            self,
            file1: str | Path,
            file2: Optional[str | Path] = None,
    ) -> VisualizationPayload:
        self.logger.info("Loading embeddings...")
        rows = self.loader.load_embeddings(file1)

        cols = self.loader.load_embeddings(file2) if file2 else rows

        self.logger.info("Computing correlation matrix...")
        matrix = compute_correlation_matrix(rows.embeddings, cols.embeddings)
        self.logger.info("Correlation matrix shape: %d x %d", matrix.shape[0], matrix.shape[1])

        return VisualizationPayload.build(
            matrix,
            rows.chunks,
            cols.chunks,
            row_file=file1,
            col_file=file2,
            max_label_len=self.max_label_len,
        )
