"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillcheck.scanner.document import Document, parse_document
from skillcheck.scanner.engine import ScanEngine


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> Document:
        return parse_document(fixtures_dir / name)

    return _load


@pytest.fixture
def engine() -> ScanEngine:
    return ScanEngine()
