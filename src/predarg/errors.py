"""Exception taxonomy for predicate-argument views."""

from __future__ import annotations


class PredArgError(Exception):
    """Base class for all predarg errors."""
    pass


class ArityMismatchError(PredArgError, ValueError):
    """Raised when argument, label and score counts disagree during registration."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Number of arguments != number of {what} ({expected} != {actual})"
        )


class PredicateNotFoundError(PredArgError, LookupError):
    """Raised when a constituent is queried as a predicate but is not one."""

    def __init__(self, predicate: object):
        self.predicate = predicate
        super().__init__(f"Predicate {predicate} not found")


class DuplicatePredicateError(PredArgError, ValueError):
    """Raised when a predicate is registered twice and duplicates are rejected."""

    def __init__(self, predicate: object):
        self.predicate = predicate
        super().__init__(f"Predicate {predicate} already registered")


class ConstituentNotFoundError(PredArgError, LookupError):
    """Raised when a relation endpoint is not part of the view."""

    def __init__(self, constituent: object, view_name: str):
        self.constituent = constituent
        self.view_name = view_name
        super().__init__(f"Constituent {constituent} is not in view '{view_name}'")


class ForeignConstituentError(PredArgError, ValueError):
    """Raised when a constituent belongs to another view or another text."""
    pass


class InvalidSpanError(PredArgError, ValueError):
    """Raised when a token span is empty or outside the text."""
    pass


__all__ = [
    "PredArgError",
    "ArityMismatchError",
    "PredicateNotFoundError",
    "DuplicatePredicateError",
    "ConstituentNotFoundError",
    "ForeignConstituentError",
    "InvalidSpanError",
]
