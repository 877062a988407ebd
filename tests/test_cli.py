# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-30
# Description: test_cli.py
# -----------------------------------------------------------------------------
import json
from typing import Any, Dict

import pytest
from click.testing import CliRunner
from starlette.testclient import TestClient

import cli.corr as corr_cli
import cli.read as read_cli
from reader.types import ReadResponse
from utility.errors import InvalidInputError


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def served(monkeypatch) -> Dict[str, Any]:
    """Capture uvicorn.run() instead of binding a port."""
    captured: Dict[str, Any] = {}

    def fake_run(app, host, port, **kwargs):
        captured.update(app=app, host=host, port=port)

    monkeypatch.setattr(corr_cli.uvicorn, "run", fake_run)
    return captured


def test_corr_single_file_starts_server(runner, served, basis_file):
    result = runner.invoke(corr_cli.main, [str(basis_file)])

    assert result.exit_code == 0, result.output
    assert served["port"] == 3000

    resp = TestClient(served["app"]).get("/")
    assert resp.status_code == 200
    assert "basis.jsonl" in resp.text


def test_corr_options(runner, served, basis_file, tmp_path):
    other = tmp_path / "other.jsonl"
    other.write_text(basis_file.read_text(encoding="utf-8"), encoding="utf-8")

    result = runner.invoke(
        corr_cli.main,
        [str(basis_file), str(other), "--port", "8123", "--model", "jina-clip-v2"],
    )

    assert result.exit_code == 0, result.output
    assert served["port"] == 8123
    assert served["app"].state.payload.col_file == "other.jsonl"


def test_corr_missing_file_exits_with_error(runner, served, tmp_path):
    result = runner.invoke(corr_cli.main, [str(tmp_path / "missing.jsonl")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert served == {}


def test_corr_directory_argument_exits_with_error(runner, served, tmp_path):
    result = runner.invoke(corr_cli.main, [str(tmp_path)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert served == {}


def test_corr_bad_json_exits_with_error(runner, served, tmp_path):
    bad = tmp_path / "bad.jsonl"
    bad.write_text("{oops\n", encoding="utf-8")

    result = runner.invoke(corr_cli.main, [str(bad)])

    assert result.exit_code == 1
    assert "bad.jsonl:1" in result.output


def test_corr_dimension_mismatch_between_files(runner, served, basis_file, tmp_path):
    wide = tmp_path / "wide.jsonl"
    wide.write_text('{"embedding": [1, 0, 0], "chunk": "3d"}\n', encoding="utf-8")

    result = runner.invoke(corr_cli.main, [str(basis_file), str(wide)])

    assert result.exit_code == 1
    assert "dimensions differ" in result.output


def test_corr_requires_file1(runner, served):
    result = runner.invoke(corr_cli.main, [])
    assert result.exit_code == 2


class FakeReader:
    last: Dict[str, Any] = {}

    def __init__(self, cfg):
        self.cfg = cfg

    def read_url(self, url, with_all_links=False):
        if not url.startswith(("http://", "https://")):
            raise InvalidInputError("Invalid URL, only http and https URLs are supported")
        FakeReader.last = {"url": url, "with_all_links": with_all_links}
        return ReadResponse.model_validate({"data": {"title": "T", "url": url, "content": "body"}})


def test_read_url_prints_data(runner, monkeypatch):
    monkeypatch.setenv("JINA_API_KEY", "secret")
    monkeypatch.setattr(read_cli, "JinaReader", FakeReader)

    result = runner.invoke(read_cli.main, ["https://example.com", "--with-all-links"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"title": "T", "url": "https://example.com", "content": "body"}
    assert FakeReader.last == {"url": "https://example.com", "with_all_links": True}


def test_read_url_invalid_input(runner, monkeypatch):
    monkeypatch.setenv("JINA_API_KEY", "secret")
    monkeypatch.setattr(read_cli, "JinaReader", FakeReader)

    result = runner.invoke(read_cli.main, ["ftp://x"])

    assert result.exit_code == 1
    assert "Error: Invalid URL" in result.output


def test_read_url_missing_api_key(runner, monkeypatch):
    monkeypatch.delenv("JINA_API_KEY", raising=False)

    result = runner.invoke(read_cli.main, ["https://example.com"])

    assert result.exit_code == 1
    assert "JINA_API_KEY" in result.output
