"""Shared fixtures for the Android bridge tests."""

import pytest

from .fakes import FakePlatform


@pytest.fixture
def platform():
    """A platform on which nothing resolves."""
    return FakePlatform()
