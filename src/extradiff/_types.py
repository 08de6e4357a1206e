"""Immutable result records for reconcile() and reconcile_indexed().

Equality is structural and deep. Hashing freezes nested lists, dicts and
sets first, so records carrying plain JSON-like payloads stay hashable.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _freeze(obj: Any) -> Any:
    """Return a hashable view of ``obj``, recursing into builtin containers."""
    if isinstance(obj, Mapping):
        return frozenset((key, _freeze(value)) for key, value in obj.items())
    if isinstance(obj, AbstractSet):
        return frozenset(_freeze(value) for value in obj)
    if isinstance(obj, (list, tuple)):
        return tuple(_freeze(value) for value in obj)
    return obj


def deep_hash(*values: Any) -> int:
    """Hash ``values`` structurally."""
    return hash(tuple(_freeze(value) for value in values))


@dataclass(frozen=True)
class Update(Generic[T]):
    """An identity present on both sides whose content changed."""

    old: T
    updated: T

    def __hash__(self) -> int:
        return deep_hash(self.old, self.updated)


@dataclass(frozen=True)
class IndexedValue(Generic[T]):
    """A value together with its position in its source collection."""

    index: int
    value: T

    def __hash__(self) -> int:
        return deep_hash(self.index, self.value)


@dataclass(frozen=True)
class IndexedRemove(Generic[T]):
    """A removed element; ``index`` is its position in the baseline."""

    data: T
    index: int

    def __hash__(self) -> int:
        return deep_hash(self.data, self.index)


@dataclass(frozen=True)
class IndexedInsert(Generic[T]):
    """An added element; ``index`` is its position in the current collection."""

    data: T
    index: int

    def __hash__(self) -> int:
        return deep_hash(self.data, self.index)


@dataclass(frozen=True)
class IndexedUpdate(Generic[T]):
    """An updated element with its baseline and current positions."""

    old: IndexedValue[T]
    updated: IndexedValue[T]

    @property
    def index(self) -> int:
        """Current-side position, for patching while walking the current list."""
        return self.updated.index

    def __hash__(self) -> int:
        return deep_hash(self.old, self.updated)


class _DifferenceMixin:
    """Queries, equality and hashing shared by both result types."""

    removed: tuple[Any, ...]
    added: tuple[Any, ...]
    updated: tuple[Any, ...]
    actual: Sequence[Any]

    @property
    def has_removed(self) -> bool:
        """True when any baseline identity is missing from current."""
        return bool(self.removed)

    @property
    def has_added(self) -> bool:
        """True when any current identity is missing from baseline."""
        return bool(self.added)

    @property
    def has_updated(self) -> bool:
        """True when any matched identity changed content."""
        return bool(self.updated)

    @property
    def has_difference(self) -> bool:
        """True when anything was added, removed or updated."""
        return self.has_added or self.has_removed or self.has_updated

    def _comparison_key(self) -> tuple[Any, ...]:
        return (self.removed, self.added, self.updated, tuple(self.actual))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        assert isinstance(other, _DifferenceMixin)
        return self._comparison_key() == other._comparison_key()

    def __hash__(self) -> int:
        return deep_hash(*self._comparison_key())


@dataclass(frozen=True, eq=False)
class DiffResult(_DifferenceMixin, Generic[T]):
    """Outcome of an unordered reconciliation, relative to the current collection.

    Attributes:
        removed: Elements whose identity exists only in the baseline.
        added: Elements whose identity exists only in the current collection.
        updated: Matched identities whose content changed.
        actual: The current collection exactly as it was passed in.
    """

    removed: tuple[T, ...]
    added: tuple[T, ...]
    updated: tuple[Update[T], ...]
    actual: Sequence[T]


@dataclass(frozen=True, eq=False)
class IndexedDiffResult(_DifferenceMixin, Generic[T]):
    """Outcome of a positional reconciliation.

    Attributes:
        removed: Removed elements with their baseline positions.
        added: Added elements with their current positions.
        updated: Changed elements with both positions.
        actual: The current collection exactly as it was passed in.
    """

    removed: tuple[IndexedRemove[T], ...]
    added: tuple[IndexedInsert[T], ...]
    updated: tuple[IndexedUpdate[T], ...]
    actual: Sequence[T]
