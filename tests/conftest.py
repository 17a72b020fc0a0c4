"""Pytest fixtures for spheresegments tests."""

import logging

import pytest

from spheresegments import Console, Measurement


# ============================================================================
# Measurement Fixtures
# ============================================================================

@pytest.fixture
def sample_measurement():
    """R=5, ha=4, hb=3: a thin band near the top of the sphere."""
    return Measurement(R=5.0, ha=4.0, hb=3.0)


@pytest.fixture
def polar_measurement():
    """Segment whose top plane touches the pole (top cap radius 0)."""
    return Measurement(R=5.0, ha=5.0, hb=0.5)


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def scripted_console():
    """Factory for a Console fed from a list of lines, collecting output."""
    def _make(*lines):
        output = []
        console = Console(lines=list(lines), write=output.append)
        return console, output
    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers added by setup_logging so streams do not leak between tests."""
    yield
    logger = logging.getLogger("spheresegments")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
