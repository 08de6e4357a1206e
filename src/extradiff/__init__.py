"""ExtraDiff: reconcile two collections into added, removed and updated elements.

Public API:
    reconcile(current, baseline, ...) -> DiffResult
    reconcile_indexed(current, baseline, ...) -> IndexedDiffResult
    Comparators: reusable identity/content configuration
"""

from ._comparators import Comparators
from ._diff import reconcile
from ._exceptions import ComparatorConfigError, ExtraDiffError
from ._indexed_diff import reconcile_indexed
from ._types import (
    DiffResult,
    IndexedDiffResult,
    IndexedInsert,
    IndexedRemove,
    IndexedUpdate,
    IndexedValue,
    Update,
)

__all__ = [
    # Reconcilers
    "reconcile",
    "reconcile_indexed",
    # Configuration
    "Comparators",
    # Results
    "DiffResult",
    "IndexedDiffResult",
    "IndexedInsert",
    "IndexedRemove",
    "IndexedUpdate",
    "IndexedValue",
    "Update",
    # Exceptions
    "ExtraDiffError",
    "ComparatorConfigError",
]
