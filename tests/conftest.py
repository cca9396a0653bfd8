"""Shared pytest fixtures and markers for all tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def cooperator():
    """Provide an Always Cooperate strategy."""
    from dilemma.strategies import AlwaysCooperate
    return AlwaysCooperate()


@pytest.fixture
def defector():
    """Provide an Always Defect strategy."""
    from dilemma.strategies import AlwaysDefect
    return AlwaysDefect()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables for the duration of a test."""
    for name in ("DILEMMA_STRATEGY_A", "DILEMMA_STRATEGY_B", "DILEMMA_NUM_ROUNDS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
