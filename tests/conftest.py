# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-21
# Description: conftest.py
# -----------------------------------------------------------------------------

import json
import sys
from pathlib import Path

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


def write_jsonl(path: Path, records: list) -> Path:
    path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def basis_records() -> list:
    return [
        {"embedding": [1, 0], "chunk": "east"},
        {"embedding": [0, 1], "chunk": "north"},
        {"embedding": [1, 1], "chunk": "north-east"},
    ]


@pytest.fixture
def basis_file(tmp_path: Path, basis_records: list) -> Path:
    return write_jsonl(tmp_path / "basis.jsonl", basis_records)
