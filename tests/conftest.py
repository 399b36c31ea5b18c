"""Shared pytest fixtures for the apinormalizer test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

_FILES_DIR = Path(__file__).resolve().parent / "files"


@pytest.fixture
def generated_api_path() -> Path:
    """Provide the marker-annotated emitter output fixture path."""

    return _FILES_DIR / "generated_api.txt"


@pytest.fixture
def normalized_api_path() -> Path:
    """Provide the approved normalized baseline for `generated_api_path`."""

    return _FILES_DIR / "normalized_api.txt"


@pytest.fixture
def generated_api_text(generated_api_path: Path) -> str:
    """Provide emitter output text with its original line endings."""

    return generated_api_path.read_text(encoding="utf-8")


@pytest.fixture
def normalized_api_text(normalized_api_path: Path) -> str:
    """Provide the approved baseline without its trailing newline."""

    return normalized_api_path.read_text(encoding="utf-8").rstrip("\n")
