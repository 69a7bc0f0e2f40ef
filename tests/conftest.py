"""Pytest configuration and fixtures for rstrftime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so rstrftime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from rstrftime.source import Instant  # noqa: E402

EST = -5 * 3600
EDT = -4 * 3600


@pytest.fixture
def reference_time() -> Instant:
    """2006-01-02T15:04:05.123456789-05:00 (EST), a Monday."""
    return Instant.of(2006, 1, 2, 15, 4, 5, 123_456_789, utc_offset=EST, zone_name="EST")


@pytest.fixture
def july_time() -> Instant:
    """2017-07-10T18:45:00-04:00 (EDT)."""
    return Instant.of(2017, 7, 10, 18, 45, utc_offset=EDT, zone_name="EDT")
