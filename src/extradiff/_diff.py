"""reconcile: unordered comparison of two collections by identity.

Reports which identities were added, removed, or kept with changed content.
Positions are ignored; see ``reconcile_indexed`` when they matter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from ._comparators import (
    Comparators,
    ContentChanged,
    IdentityEquals,
    IdentityHash,
    resolve_comparators,
)
from ._identity import index_values, key_factory, report_duplicates
from ._types import DiffResult, Update

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


def reconcile(
    current: Sequence[T],
    baseline: Sequence[T],
    *,
    identity_equals: IdentityEquals[T] | None = None,
    identity_hash: IdentityHash[T] | None = None,
    content_changed: ContentChanged[T] | None = None,
    comparators: Comparators[T] | None = None,
) -> DiffResult[T]:
    """Compute what changed between ``baseline`` and ``current``.

    Elements are matched by identity (``identity_equals``/``identity_hash``,
    natural ``==``/``hash`` by default). A match is reported as updated when
    ``content_changed(current_value, baseline_value)`` is true (``!=`` by
    default); it is called exactly once per match and never for pure
    additions or removals.

    With the default policy identity and content coincide, so ``updated`` is
    always empty and the result is a plain set difference.

    If an identity repeats within one input, the last occurrence wins.

    Args:
        current: The "after" collection. Returned verbatim as ``actual``.
        baseline: The "before" collection.
        identity_equals: Whether two elements are the same entity.
        identity_hash: Hash consistent with ``identity_equals``.
        content_changed: Whether a matched element changed.
        comparators: Pre-built ``Comparators``; exclusive with the above.

    Returns:
        DiffResult with ``added``/``updated`` in current order and ``removed``
        in baseline order.

    Raises:
        ComparatorConfigError: If the comparison callables are invalid.

    Example:
        >>> reconcile([1, 3, 4, 5], [1, 2, 3, 4]).added
        (5,)
    """
    resolved = resolve_comparators(
        comparators, identity_equals, identity_hash, content_changed
    )
    make_key = key_factory(resolved)
    changed = resolved.content_policy

    baseline_index = index_values(baseline, make_key)
    current_index = index_values(current, make_key)
    report_duplicates("baseline", baseline, baseline_index)
    report_duplicates("current", current, current_index)

    added: list[T] = []
    updated: list[Update[T]] = []
    for key, item in current_index.items():
        previous = baseline_index.get(key, _MISSING)
        if previous is _MISSING:
            added.append(item)
            continue
        if changed(item, previous):  # type: ignore[arg-type]
            updated.append(Update(old=previous, updated=item))  # type: ignore[arg-type]

    removed = [item for key, item in baseline_index.items() if key not in current_index]

    logger.debug(
        "Reconciled %d current against %d baseline elements: "
        "%d added, %d removed, %d updated",
        len(current),
        len(baseline),
        len(added),
        len(removed),
        len(updated),
    )

    return DiffResult(
        removed=tuple(removed),
        added=tuple(added),
        updated=tuple(updated),
        actual=current,
    )

