# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-24
# Updated: 2026-10-16
# Description: EmbeddingFileLoader
# -----------------------------------------------------------------------------

import json
import logging
import time
from pathlib import Path
from typing import Iterator, Optional

from embedding.EmbeddingRecord import EmbeddingRecord, LoadedEmbeddings
from utility.assets import resolve_image_reference
from utility.errors import EmbeddingDimensionError, EmbeddingParseError
from utility.logging_utils import get_class_logger


class EmbeddingFileLoader:
    """
    Reads precomputed embeddings from newline-delimited JSON files.

    Provides:
      - iter_records(): lazily yields one EmbeddingRecord per line
      - load_embeddings(): drains a file into parallel embeddings/chunks lists,
        inlining local image chunks as data URIs

    Each line must be an object with at least 'embedding' (array of numbers)
    and 'chunk' (string). Blank lines are skipped.
    """

    def __init__(self, *, strict_dimensions: bool = True, logger: logging.Logger | None = None):
        self.strict_dimensions = strict_dimensions
        self.logger = logger or get_class_logger(self.__class__)

    def iter_records(self, file_path: str | Path) -> Iterator[EmbeddingRecord]:
        """
        Yield records in file order without reading the whole file up front.

        Raises FileNotFoundError/OSError if the file cannot be opened and
        EmbeddingParseError on the first malformed line.
        """
        path = Path(file_path)
        with path.open("rb") as fh:
            for line_no, raw in enumerate(fh, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise EmbeddingParseError(str(path), line_no, f"invalid UTF-8: {e.reason}") from e
                if not line.strip():
                    continue
                try:
                    obj = json.loads(line)
                except json.JSONDecodeError as e:
                    raise EmbeddingParseError(str(path), line_no, f"invalid JSON: {e.msg}") from e
                try:
                    yield EmbeddingRecord.from_dict(obj)
                except ValueError as e:
                    raise EmbeddingParseError(str(path), line_no, str(e)) from e

    def load_embeddings(self, file_path: str | Path) -> LoadedEmbeddings:
        """
        Load one JSONL file into parallel sequences.

        Image chunks given as local paths are resolved relative to the file's
        directory and re-encoded as data URIs; URLs and data URIs pass through.
        Nothing is returned if any line fails.
        """
        path = Path(file_path)
        base_dir = path.parent
        start_time = time.time()

        self.logger.info("Loading embeddings from '%s'...", path)
        out = LoadedEmbeddings()
        dim: Optional[int] = None

        for record in self.iter_records(path):
            if dim is None:
                dim = len(record.embedding)
            elif self.strict_dimensions and len(record.embedding) != dim:
                raise EmbeddingDimensionError(
                    f"{path}: record {len(out) + 1} has dimension {len(record.embedding)}, expected {dim}"
                )

            out.embeddings.append(record.embedding)
            out.chunks.append(resolve_image_reference(record.chunk, base_dir))

        elapsed = (time.time() - start_time) * 1000.0
        if not out.embeddings:
            self.logger.warning("No embeddings found in '%s' (%.1f ms)", path, elapsed)
        else:
            self.logger.info(
                "Loaded %d embedding(s) of dimension %d from '%s' (%.1f ms)",
                len(out),
                dim,
                path,
                elapsed,
            )
        return out
