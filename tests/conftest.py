# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from roster_csv.csvfile.format import HEADER
from roster_csv.logging.init import reset_logging

VALID_LINE = "Ann Lee,Year 1,A1234567B,ann@x.com,81234567,Vegetarian,Member,;"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("ROSTER_CSV_DEFAULT_PATH", "ROSTER_CSV_ENCODING", "ROSTER_CSV_ERROR_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def write_roster(tmp_path: Path):
    """Write a roster file: header + given data lines."""
    def _write(lines: list[str], name: str = "members.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_config_yaml() -> str:
    return """default_path: data/members.csv
encoding: utf-8
open_after_export: false
show_progress: false
error_log_dir: logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "roster.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
