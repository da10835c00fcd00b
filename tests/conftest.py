"""Shared fixtures: configuration isolation and an in-memory transport."""

from __future__ import annotations

import pytest

from tire.config import Configuration
from tire.testing import InMemoryTransport


@pytest.fixture(autouse=True)
def _reset_configuration():
    Configuration.reset()
    yield
    Configuration.reset()


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()
