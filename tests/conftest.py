"""Shared test fixtures for checkin-directives.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import io

import pytest

from checkin_directives.options import CheckinOptions
from checkin_directives.scanner import DirectiveScanner


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "checkin_directives"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def options() -> CheckinOptions:
    """Fresh checkin options with every field at its default."""
    return CheckinOptions()


@pytest.fixture()
def sink() -> io.StringIO:
    """In-memory output sink capturing progress lines."""
    return io.StringIO()


@pytest.fixture()
def scanner(sink: io.StringIO) -> DirectiveScanner:
    """Scanner with the default grammar writing to ``sink``."""
    return DirectiveScanner(sink)
