"""
Utility modules for predarg.

Submodules:
    serialize: Normalization of caller-supplied label and score sequences
"""

from predarg.utils.serialize import (
    normalize_sequence,
    normalize_labels,
    normalize_scores,
)

__all__ = [
    "normalize_sequence",
    "normalize_labels",
    "normalize_scores",
]
