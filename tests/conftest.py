"""Global pytest configuration."""

from __future__ import annotations

import logging

import pytest

from pathgraph.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    """CLI tests change the package log level; put it back after each test."""
    yield
    set_global_log_level(logging.INFO)
