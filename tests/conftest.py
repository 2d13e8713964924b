"""Shared fixtures for stuffsite tests."""

import pytest

from stuffsite.app import App
from stuffsite.pages import create_app


@pytest.fixture
def site() -> App:
    """A fresh copy of the stuff inventory site, not yet frozen."""
    return create_app()
