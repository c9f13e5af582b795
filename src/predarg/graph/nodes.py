"""
Graph nodes for text annotation views.

A Constituent is a token span over a TextAnnotation, carrying a label, a
score and a string-to-string attribute mapping. Constituents do not store
their relations: once added to a View they receive a stable node id, and
their incoming/outgoing relations are read from the view's edge arena. A
constituent that has not been added to any view has no relations.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set

from predarg.graph.text import TextAnnotation

if TYPE_CHECKING:
    from predarg.graph.edges import Relation
    from predarg.graph.view import View


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass(eq=False)
class Constituent:
    """
    A token span node.

    Equality and hashing are by identity: two constituents over the same span
    are different nodes.

    Attributes:
        label: Constituent label (e.g., "Predicate", "A0").
        view_name: Name of the view this constituent is meant for.
        text: The TextAnnotation the span refers to.
        start: First token index (inclusive).
        end: Last token index (exclusive).
        score: Confidence score.
        attributes: String-to-string attribute mapping.
    """

    label: str
    view_name: str
    text: TextAnnotation
    start: int
    end: int
    score: float = 1.0
    attributes: Dict[str, str] = field(default_factory=dict)
    # Set by View.add_constituent
    _view: Optional["View"] = field(default=None, init=False, repr=False)
    _node_id: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.text.check_span(self.start, self.end)
        self.score = float(self.score)
        self.attributes = {str(k): str(v) for k, v in self.attributes.items()}

    # -------------------------------------------------------------------------
    # Span
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Number of tokens in the span."""
        return self.end - self.start

    @property
    def node_id(self) -> Optional[int]:
        """Stable id assigned by the owning view, or None if unattached."""
        return self._node_id

    @property
    def view(self) -> Optional["View"]:
        return self._view

    def covers_token(self, token_id: int) -> bool:
        return self.start <= token_id < self.end

    def get_surface_form(self) -> str:
        """Raw text covered by this span."""
        return self.text.get_text(self.start, self.end)

    def get_tokenized_surface_form(self) -> str:
        """Tokens of this span joined by single spaces."""
        return self.text.get_tokenized_text(self.start, self.end)

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def add_attribute(self, key: str, value: str) -> None:
        self.attributes[str(key)] = str(value)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def get_attribute(self, key: str) -> Optional[str]:
        """Return the attribute value, or None if absent."""
        return self.attributes.get(key)

    def get_attribute_keys(self) -> Set[str]:
        return set(self.attributes)

    # -------------------------------------------------------------------------
    # Relations (resolved through the owning view)
    # -------------------------------------------------------------------------

    def get_incoming_relations(self) -> List["Relation"]:
        if self._view is None:
            return []
        return self._view.get_incoming_relations(self)

    def get_outgoing_relations(self) -> List["Relation"]:
        if self._view is None:
            return []
        return self._view.get_outgoing_relations(self)

    def remove_all_incoming_relations(self) -> None:
        """Detach every incoming relation from this node and from the view."""
        if self._view is not None:
            for relation in self._view.get_incoming_relations(self):
                self._view.remove_relation(relation)

    def remove_all_outgoing_relations(self) -> None:
        """Detach every outgoing relation from this node and from the view."""
        if self._view is not None:
            for relation in self._view.get_outgoing_relations(self):
                self._view.remove_relation(relation)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for DataFrame construction."""
        return {
            "node_id": self._node_id,
            "label": self.label,
            "view_name": self.view_name,
            "start": self.start,
            "end": self.end,
            "score": self.score,
            "surface": self.get_tokenized_surface_form(),
            "attributes": dict(self.attributes),
        }

    def __str__(self) -> str:
        return self.get_tokenized_surface_form()
