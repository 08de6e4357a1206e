"""Element stubs for reconciliation tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Stub:
    """Element whose identity is ``id`` and whose content is ``name``."""

    id: int
    name: str


def by_id() -> dict[str, Any]:
    """Keyword arguments matching Stub elements by id."""
    return {
        "identity_equals": lambda a, b: a.id == b.id,
        "identity_hash": lambda item: hash(item.id),
    }
