"""Shared fixtures."""

from __future__ import annotations

import pytest

from fakes import FakeApi


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def five_items():
    """The A..E resource, served two per page."""
    return FakeApi(["A", "B", "C", "D", "E"], server_max=2)
