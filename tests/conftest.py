"""Pytest configuration and fixtures for ttninjs tests.

This module provides common fixtures and configuration for all tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ttninjs.config import TTNINJS_MAX_DEPTH_ENV

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "ninjs"


@pytest.fixture(autouse=True)
def clear_codec_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default codec configuration.

    Tests that need a different maximum depth set TTNINJS_MAX_DEPTH themselves.
    """
    monkeypatch.delenv(TTNINJS_MAX_DEPTH_ENV, raising=False)


def load_fixture_bytes(name: str) -> bytes:
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def article_bytes() -> bytes:
    """Raw JSON of a published article with an associated picture."""
    return load_fixture_bytes("article.json")


@pytest.fixture
def article_tree(article_bytes: bytes) -> dict[str, Any]:
    tree: dict[str, Any] = json.loads(article_bytes)
    return tree


@pytest.fixture
def planning_bytes() -> bytes:
    """Raw JSON of a commissioned planning item with assignments."""
    return load_fixture_bytes("planning.json")
