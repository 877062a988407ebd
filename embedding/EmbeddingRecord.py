# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-24
# Description: EmbeddingRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class EmbeddingRecord:
    """One line of an embeddings JSONL file: vector + the chunk it was computed from."""
    embedding: List[float]
    chunk: str

    @classmethod
    def from_dict(cls, obj: Any) -> "EmbeddingRecord":
        """
        Build a record from a decoded JSON object.
        Raises ValueError if the object is not shaped like {embedding: [...], chunk: "..."}.
        """
        if not isinstance(obj, dict):
            raise ValueError(f"expected a JSON object, got {type(obj).__name__}")

        embedding = obj.get("embedding")
        chunk = obj.get("chunk")

        if not isinstance(embedding, list):
            raise ValueError("'embedding' must be an array of numbers")
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in embedding):
            raise ValueError("'embedding' must contain only numbers")
        if not isinstance(chunk, str):
            raise ValueError("'chunk' must be a string")

        return cls(embedding=embedding, chunk=chunk)


@dataclass
class LoadedEmbeddings:
    """Parallel sequences read from one file, in line order."""
    embeddings: List[List[float]] = field(default_factory=list)
    chunks: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.embeddings)

    @property
    def dim(self) -> int | None:
        return len(self.embeddings[0]) if self.embeddings else None
