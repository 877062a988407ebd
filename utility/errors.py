# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Description: errors.py
# -----------------------------------------------------------------------------
# Transport failures surface as requests.RequestException and file access
# failures as OSError; only the cases below need their own types.


class InvalidInputError(ValueError):
    """Caller supplied an argument that cannot be sent (e.g. empty or non-http URL)."""


class InvalidResponseError(ValueError):
    """External service answered, but the envelope is missing expected fields."""


class EmbeddingParseError(ValueError):
    """A line of an embeddings JSONL file is not a valid {embedding, chunk} record."""

    def __init__(self, path: str, line_no: int, reason: str):
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{path}:{line_no}: {reason}")


class EmbeddingDimensionError(ValueError):
    """Embedding vectors that must be compared have different lengths."""
