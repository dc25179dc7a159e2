"""Shared fixtures."""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DEATHRATE_* variables so machine settings cannot leak into tests."""
    for name in list(os.environ):
        if name.upper().startswith("DEATHRATE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def zigzag():
    """Seven-point zigzag alternating between 0 and 5."""
    return [(float(i), 0.0 if i % 2 == 0 else 5.0) for i in range(7)]


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
