"""Shared fixtures."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Create a temporary git repository root (an empty .git/ directory)."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture(autouse=True)
def reset_author_logger():
    """Drop handlers that main() installs so they don't outlive the test."""
    logger = logging.getLogger("author")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
