"""Shared fixtures for testmark tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def example_path() -> Path:
    """Path to the reference document with three hunks and one plain fence."""
    return FIXTURES / "example.md"


@pytest.fixture
def example_bytes(example_path: Path) -> bytes:
    return example_path.read_bytes()
