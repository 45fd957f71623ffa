"""
Shared pytest configuration for the embedcore test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one Typer CliRunner setup
    • JSON fixtures load consistently from tests/fixtures/
    • The mock embedding client records every call for ordering assertions
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

# ============================================================================
# FIXTURE DIRECTORY
# ============================================================================
FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def load_json_fixture():
    """Load a JSON fixture from tests/fixtures/ as a Python object."""

    def _loader(name: str):
        path = FIXTURES_DIR / name
        text = path.read_text(encoding="utf-8")
        return json.loads(text)

    return _loader


@pytest.fixture
def fixture_path():
    """Resolve the path of a file in tests/fixtures/."""

    def _resolve(name: str) -> Path:
        return FIXTURES_DIR / name

    return _resolve


# ---------------------------------------------------------------------------
# Fixture: mock_embedding_client
# ---------------------------------------------------------------------------
@pytest.fixture
def mock_embedding_client():
    """
    Deterministic embedding client for pipeline tests.

    Exposes:
        • .generate(text) → [float(len(text)), float(call_index)]
        • .texts → every text passed to generate(), in call order
    """

    class MockEmbeddingClient:
        def __init__(self):
            self.texts = []

        def generate(self, text: str):
            self.texts.append(text)
            return [float(len(text)), float(len(self.texts) - 1)]

    return MockEmbeddingClient()
