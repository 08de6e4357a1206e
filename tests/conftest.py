"""Shared test fixtures for extradiff."""

from __future__ import annotations

import pytest

from tests.stubs import Stub


@pytest.fixture
def baseline() -> list[Stub]:
    """Baseline side of the mixed add/remove/update scenario."""
    return [Stub(1, "1"), Stub(2, "2"), Stub(4, "4")]


@pytest.fixture
def current() -> list[Stub]:
    """Current side: id 2 removed, id 3 added, id 4 renamed."""
    return [Stub(1, "1"), Stub(3, "3"), Stub(4, "5")]
