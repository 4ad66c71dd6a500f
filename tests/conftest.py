"""Shared test fixtures for mmac."""

import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no mmac env overrides."""
    monkeypatch.delenv("MMAC_CONFIG", raising=False)
    monkeypatch.delenv("MMAC_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def js_file(tmp_path):
    target = tmp_path / "foo.js"
    shutil.copy(FIXTURES / "sample.js", target)
    return target


@pytest.fixture
def md_file(tmp_path):
    target = tmp_path / "README.md"
    shutil.copy(FIXTURES / "sample.md", target)
    return target
