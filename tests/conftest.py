"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def install_guide_html() -> str:
    return _read_fixture("install_guide.html")


@pytest.fixture
def install_guide_path() -> Path:
    return FIXTURES_DIR / "install_guide.html"
