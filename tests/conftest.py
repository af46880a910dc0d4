"""Shared fixtures for specification tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the package loggers."""
    caplog.set_level(logging.DEBUG, logger="predicate_specifications")
    return caplog
