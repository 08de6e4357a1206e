"""Identity-indexed lookup tables used by the reconcilers.

Python dicts already give insertion-ordered, O(1) lookup. Custom identity
rules are plugged in by wrapping each element in an ``_IdentityKey`` whose
``__hash__``/``__eq__`` delegate to the caller's callables. With the natural
policy, elements are used as keys directly.

Duplicate identities: assigning into the dict keeps the slot (and therefore
the iteration position) of the first occurrence but replaces its value, so
the last occurrence wins.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Hashable, Iterable, Sized
from typing import Any, TypeVar

from ._comparators import Comparators, IdentityEquals
from ._types import IndexedValue

logger = logging.getLogger(__name__)

T = TypeVar("T")

KeyFactory = Callable[[T], Hashable]


class _IdentityKey:
    """Hashable handle routing dict lookups through identity callables."""

    __slots__ = ("value", "_equals", "_hash")

    def __init__(
        self, value: Any, equals: IdentityEquals[Any], hash_value: int
    ) -> None:
        self.value = value
        self._equals = equals
        self._hash = hash_value

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _IdentityKey):
            return NotImplemented
        return self is other or bool(self._equals(self.value, other.value))

    def __repr__(self) -> str:
        return f"_IdentityKey({self.value!r})"


def _natural_key(value: T) -> Hashable:
    return value  # type: ignore[return-value]


def key_factory(comparators: Comparators[T]) -> KeyFactory[T]:
    """Return a function mapping an element to its identity key."""
    if comparators.uses_natural_identity:
        return _natural_key

    equals = comparators.identity_equals or operator.eq
    hasher = comparators.identity_hash or hash

    def make_key(value: T) -> Hashable:
        # Hash once per element; dict probes reuse the cached value.
        return _IdentityKey(value, equals, hasher(value))

    return make_key


def index_values(items: Iterable[T], make_key: KeyFactory[T]) -> dict[Hashable, T]:
    """Build an identity -> value table, last occurrence winning."""
    index: dict[Hashable, T] = {}
    for item in items:
        index[make_key(item)] = item
    return index


def index_positions(
    items: Iterable[T], make_key: KeyFactory[T]
) -> dict[Hashable, IndexedValue[T]]:
    """Build an identity -> (index, value) table, last occurrence winning."""
    index: dict[Hashable, IndexedValue[T]] = {}
    for position, item in enumerate(items):
        index[make_key(item)] = IndexedValue(index=position, value=item)
    return index


def report_duplicates(side: str, items: Sized, index: Sized) -> None:
    """Log when an input collapsed duplicate identities into one index entry."""
    collapsed = len(items) - len(index)
    if collapsed:
        logger.debug(
            "%d duplicate identities in %s collection; last occurrence kept",
            collapsed,
            side,
        )
