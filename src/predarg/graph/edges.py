"""
Graph edges for text annotation views.

A Relation is a directed, labeled, scored edge between two constituents.
By convention the source is a predicate and the target one of its arguments;
nothing here enforces that. A relation receives a stable edge id when a View
stores it, and the view's edge table is the only record of its existence.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from predarg.graph.nodes import Constituent


@dataclass(eq=False)
class Relation:
    """
    A single labeled edge.

    Attributes:
        relation_name: Edge label (e.g., "A0", "AM-TMP").
        source: Source constituent.
        target: Target constituent.
        score: Confidence score.
    """

    relation_name: str
    source: Constituent
    target: Constituent
    score: float = 1.0
    _edge_id: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.score = float(self.score)

    @property
    def edge_id(self) -> Optional[int]:
        """Stable id assigned by the owning view, or None if not stored."""
        return self._edge_id

    @property
    def label(self) -> str:
        return self.relation_name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for DataFrame construction."""
        return {
            "edge_id": self._edge_id,
            "source_node_id": self.source.node_id,
            "target_node_id": self.target.node_id,
            "label": self.relation_name,
            "score": self.score,
        }

    def __repr__(self) -> str:
        return (
            f"Relation({self.relation_name!r}, {self.source} -> {self.target}, "
            f"score={self.score})"
        )
