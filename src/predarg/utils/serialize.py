"""
Normalization utilities for predarg.

Callers hand labels and scores to the view as lists, tuples or numpy arrays
(scores usually come straight out of a classifier). These helpers turn them
into plain Python lists so that lengths can be checked and values stored
without numpy types leaking into relations or exported frames.

Only sequences are accepted: one label or one score must still be passed as
a one-element sequence, so a bare value never passes the length check by
accident.
"""

from typing import Any, List

import numpy as np


def normalize_sequence(x: Any) -> List:
    """
    Normalize a sequence of per-argument values to a plain Python list.

    Handles:
    - None -> empty list
    - 1-d numpy.ndarray -> list
    - tuple / list / other non-string iterables -> list

    Raises:
        TypeError: For scalars, strings and 0-d arrays.

    Example:
        >>> normalize_sequence(np.array([1, 2, 3]))
        [1, 2, 3]
        >>> normalize_sequence(None)
        []
    """
    if x is None:
        return []

    if isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise TypeError(f"Expected a 1-d array, got {x.ndim}-d")
        return x.tolist()

    if isinstance(x, (list, tuple)):
        return list(x)

    if isinstance(x, (str, bytes, int, float, np.generic)):
        raise TypeError(f"Expected a sequence, got {type(x).__name__} {x!r}")

    return list(x)


def normalize_scores(scores: Any) -> List[float]:
    """
    Normalize relation scores to a list of floats.

    Example:
        >>> normalize_scores(np.array([0.9, 1]))
        [0.9, 1.0]
    """
    return [float(s) for s in normalize_sequence(scores)]


def normalize_labels(labels: Any) -> List[str]:
    """
    Normalize relation labels to a list of strings.

    Example:
        >>> normalize_labels(("A0", "A1"))
        ['A0', 'A1']
    """
    return [str(label) for label in normalize_sequence(labels)]
