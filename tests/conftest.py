"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from ./config.yaml and $DIGESTKIT_CONFIG."""
    monkeypatch.delenv("DIGESTKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def million_a():
    return b"a" * 1_000_000
