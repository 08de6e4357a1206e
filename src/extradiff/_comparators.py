"""Comparison configuration shared by both reconcilers.

A reconciliation is driven by three callables:

- ``identity_equals(a, b)``: do ``a`` and ``b`` describe the same entity?
- ``identity_hash(a)``: hash consistent with ``identity_equals``.
- ``content_changed(current, previous)``: did a matched entity change?

Any of them may be omitted, in which case natural ``==``/``hash``/``!=`` is
used. Keeping ``identity_hash`` consistent with ``identity_equals`` is the
caller's responsibility; an inconsistent pair silently turns updates into
add/remove pairs.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ._exceptions import ComparatorConfigError

T = TypeVar("T")

IdentityEquals = Callable[[T, T], bool]
IdentityHash = Callable[[T], int]
ContentChanged = Callable[[T, T], bool]


def default_content_changed(current: Any, previous: Any) -> bool:
    """Natural content policy: a match is updated when the values differ."""
    return bool(current != previous)


@dataclass(frozen=True)
class Comparators(Generic[T]):
    """Bundle of comparison callables, reusable across reconciliations."""

    identity_equals: IdentityEquals[T] | None = None
    identity_hash: IdentityHash[T] | None = None
    content_changed: ContentChanged[T] | None = None

    def __post_init__(self) -> None:
        _check_callables(
            identity_equals=self.identity_equals,
            identity_hash=self.identity_hash,
            content_changed=self.content_changed,
        )

    @classmethod
    def by_key(
        cls,
        key: Callable[[T], Hashable],
        content_changed: ContentChanged[T] | None = None,
    ) -> Comparators[T]:
        """Build comparators that treat elements with equal ``key(...)`` as one entity.

        Example:
            Comparators.by_key(lambda user: user.id)
        """
        if not callable(key):
            raise ComparatorConfigError(
                f"key must be callable, got {type(key).__name__}", parameter="key"
            )

        def identity_equals(a: T, b: T) -> bool:
            return bool(key(a) == key(b))

        def identity_hash(item: T) -> int:
            return hash(key(item))

        return cls(
            identity_equals=identity_equals,
            identity_hash=identity_hash,
            content_changed=content_changed,
        )

    @property
    def uses_natural_identity(self) -> bool:
        """True when elements are indexed by their own ``==``/``hash``."""
        return self.identity_equals is None and self.identity_hash is None

    @property
    def content_policy(self) -> ContentChanged[T]:
        """The effective ``content_changed`` callable."""
        return self.content_changed or default_content_changed


def resolve_comparators(
    comparators: Comparators[T] | None,
    identity_equals: IdentityEquals[T] | None = None,
    identity_hash: IdentityHash[T] | None = None,
    content_changed: ContentChanged[T] | None = None,
) -> Comparators[T]:
    """Merge a reconciler's keyword callables into a single ``Comparators``.

    Raises:
        ComparatorConfigError: If ``comparators`` is combined with explicit
            callables, or if any supplied callable is not callable.
    """
    explicit = {
        "identity_equals": identity_equals,
        "identity_hash": identity_hash,
        "content_changed": content_changed,
    }
    if comparators is None:
        return Comparators(**explicit)

    if not isinstance(comparators, Comparators):
        raise ComparatorConfigError(
            f"comparators must be a Comparators instance, got {type(comparators).__name__}",
            parameter="comparators",
        )

    conflicting = [name for name, value in explicit.items() if value is not None]
    if conflicting:
        raise ComparatorConfigError(
            "Pass either comparators= or individual callables, not both "
            f"(got comparators and {', '.join(conflicting)})",
            parameter=conflicting[0],
        )
    return comparators


def _check_callables(**callables: Any) -> None:
    for name, value in callables.items():
        if value is not None and not callable(value):
            raise ComparatorConfigError(
                f"{name} must be callable, got {type(value).__name__}",
                parameter=name,
            )
