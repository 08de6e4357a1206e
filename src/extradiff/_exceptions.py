"""Custom exceptions for ExtraDiff."""

from __future__ import annotations


class ExtraDiffError(Exception):
    """Base exception for all ExtraDiff errors."""

    pass


class ComparatorConfigError(ExtraDiffError, TypeError):
    """Raised when the comparison callables passed to a reconciler are invalid.

    Covers non-callable values and ambiguous configuration (an explicit
    ``Comparators`` object combined with individual callables).
    """

    def __init__(self, message: str, parameter: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(message)
