"""Shared pytest fixtures for the lexscan test suite."""

import pytest


@pytest.fixture(autouse=True)
def clean_lexscan_env(monkeypatch):
    """Keep the caller's LEXSCAN_* variables from leaking into tests."""
    for name in ("LEXSCAN_TYPE_CONTEXT", "LEXSCAN_WHITESPACE", "LEXSCAN_ESCAPES"):
        monkeypatch.delenv(name, raising=False)
