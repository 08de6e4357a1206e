"""reconcile_indexed: identity comparison that also reports positions.

Same classification as ``reconcile``, but every record carries the index of
the element(s) involved so callers can replay the changes as splice-style
edits. Tracking positions costs an extra record per element, so prefer
``reconcile`` when indices are not needed.
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
from ._identity import index_positions, key_factory, report_duplicates
from ._types import IndexedDiffResult, IndexedInsert, IndexedRemove, IndexedUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")


def reconcile_indexed(
    current: Sequence[T],
    baseline: Sequence[T],
    *,
    identity_equals: IdentityEquals[T] | None = None,
    identity_hash: IdentityHash[T] | None = None,
    content_changed: ContentChanged[T] | None = None,
    comparators: Comparators[T] | None = None,
) -> IndexedDiffResult[T]:
    """Compute what changed between ``baseline`` and ``current``, with positions.

    Matching rules and arguments are the same as for ``reconcile``.

    Removed records use baseline positions, inserted records use current
    positions, and updates carry both (``IndexedUpdate.index`` is the
    current-side one). When an identity repeats within one input, only its
    last occurrence (value and index) takes part in matching.

    Example:
        >>> result = reconcile_indexed([1, 5, 3, 6], [1, 2, 3, 4])
        >>> [(r.data, r.index) for r in result.removed]
        [(2, 1), (4, 3)]
        >>> [(a.data, a.index) for a in result.added]
        [(5, 1), (6, 3)]
    """
    resolved = resolve_comparators(
        comparators, identity_equals, identity_hash, content_changed
    )
    make_key = key_factory(resolved)
    changed = resolved.content_policy

    baseline_index = index_positions(baseline, make_key)
    current_index = index_positions(current, make_key)
    report_duplicates("baseline", baseline, baseline_index)
    report_duplicates("current", current, current_index)

    added: list[IndexedInsert[T]] = []
    updated: list[IndexedUpdate[T]] = []
    for key, entry in current_index.items():
        previous = baseline_index.get(key)
        if previous is None:
            added.append(IndexedInsert(data=entry.value, index=entry.index))
            continue
        if changed(entry.value, previous.value):
            updated.append(IndexedUpdate(old=previous, updated=entry))

    removed = [
        IndexedRemove(data=entry.value, index=entry.index)
        for key, entry in baseline_index.items()
        if key not in current_index
    ]

    logger.debug(
        "Reconciled %d current against %d baseline elements with positions: "
        "%d added, %d removed, %d updated",
        len(current),
        len(baseline),
        len(added),
        len(removed),
        len(updated),
    )

    return IndexedDiffResult(
        removed=tuple(removed),
        added=tuple(added),
        updated=tuple(updated),
        actual=current,
    )
