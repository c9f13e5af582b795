"""
Annotation view: the node/edge store for one layer of annotation over a text.

The view keeps an arena of constituents and relations addressed by stable
integer ids:
- one authoritative edge table (edge id -> Relation)
- per-node outgoing and incoming edge-id lists

Adding or removing a relation updates the edge table and both adjacency lists
in the same call, so a relation is either present in all three places or in
none. Removing a constituent cascades: every relation touching it is removed
first, including relations that the caller did not ask about.

Every structural mutation calls _on_structure_changed(), which subclasses
override to drop derived state.
"""

import itertools
import logging
from typing import Dict, Iterator, List, Optional

from predarg.constants import DEFAULT_VIEW_SCORE, VIEW_GENERATOR_SUFFIX
from predarg.errors import ConstituentNotFoundError, ForeignConstituentError
from predarg.graph.edges import Relation
from predarg.graph.nodes import Constituent
from predarg.graph.text import TextAnnotation

logger = logging.getLogger(__name__)


class View:
    """
    A named layer of constituents and relations over one TextAnnotation.

    Args:
        view_name: Name of the view.
        text: The TextAnnotation every constituent must refer to.
        view_generator: Name of the annotator. Defaults to "<view_name>-annotator".
        score: View-level confidence score.
    """

    def __init__(
        self,
        view_name: str,
        text: TextAnnotation,
        view_generator: Optional[str] = None,
        score: float = DEFAULT_VIEW_SCORE,
    ):
        self.view_name = view_name
        self.view_generator = view_generator or view_name + VIEW_GENERATOR_SUFFIX
        self.score = float(score)
        self.text = text

        self._nodes: Dict[int, Constituent] = {}
        self._edges: Dict[int, Relation] = {}
        self._outgoing: Dict[int, List[int]] = {}
        self._incoming: Dict[int, List[int]] = {}
        self._node_ids = itertools.count()
        self._edge_ids = itertools.count()

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_constituent(self, constituent: Constituent) -> None:
        """
        Register a constituent. Adding a constituent already in this view is a no-op.

        Raises:
            ForeignConstituentError: If the constituent is held by another view
                or refers to a different TextAnnotation.
        """
        if constituent.view is self:
            return
        if constituent.view is not None:
            raise ForeignConstituentError(
                f"Constituent {constituent} already belongs to view "
                f"'{constituent.view.view_name}'"
            )
        if constituent.text is not self.text:
            raise ForeignConstituentError(
                f"Constituent {constituent} refers to {constituent.text!r}, "
                f"not to {self.text!r}"
            )

        node_id = next(self._node_ids)
        constituent._view = self
        constituent._node_id = node_id
        self._nodes[node_id] = constituent
        self._outgoing[node_id] = []
        self._incoming[node_id] = []
        self._on_structure_changed()

    def add_relation(self, relation: Relation) -> None:
        """
        Store a relation and attach it to both endpoints.

        Raises:
            ConstituentNotFoundError: If either endpoint is not in this view.
        """
        if relation.edge_id is not None and self._edges.get(relation.edge_id) is relation:
            return
        for endpoint in (relation.source, relation.target):
            if endpoint.view is not self:
                raise ConstituentNotFoundError(endpoint, self.view_name)

        edge_id = next(self._edge_ids)
        relation._edge_id = edge_id
        self._edges[edge_id] = relation
        self._outgoing[relation.source.node_id].append(edge_id)
        self._incoming[relation.target.node_id].append(edge_id)
        self._on_structure_changed()

    def remove_relation(self, relation: Relation) -> bool:
        """
        Remove a relation from the edge table and both endpoints.

        Returns:
            True if the relation was present, False otherwise.
        """
        edge_id = relation.edge_id
        if edge_id is None or self._edges.get(edge_id) is not relation:
            return False

        del self._edges[edge_id]
        self._outgoing[relation.source.node_id].remove(edge_id)
        self._incoming[relation.target.node_id].remove(edge_id)
        relation._edge_id = None
        self._on_structure_changed()
        return True

    def remove_constituent(self, constituent: Constituent) -> bool:
        """
        Remove a constituent and every relation touching it.

        Returns:
            True if the constituent was present, False otherwise.
        """
        if constituent.view is not self:
            return False

        node_id = constituent.node_id
        incident = self._incoming[node_id] + [
            e for e in self._outgoing[node_id] if e not in self._incoming[node_id]
        ]
        for edge_id in incident:
            self.remove_relation(self._edges[edge_id])
        if incident:
            logger.debug(
                f"Detached {len(incident)} relations from removed constituent {constituent}"
            )

        del self._nodes[node_id]
        del self._outgoing[node_id]
        del self._incoming[node_id]
        constituent._view = None
        constituent._node_id = None
        self._on_structure_changed()
        return True

    def _on_structure_changed(self) -> None:
        """Hook called after every structural mutation."""
        pass

    # =========================================================================
    # QUERIES
    # =========================================================================

    def get_constituents(self) -> List[Constituent]:
        """All constituents in insertion order."""
        return list(self._nodes.values())

    def get_relations(self) -> List[Relation]:
        """All relations in insertion order."""
        return list(self._edges.values())

    def get_incoming_relations(self, constituent: Constituent) -> List[Relation]:
        return [self._edges[e] for e in self._incoming[self._require(constituent)]]

    def get_outgoing_relations(self, constituent: Constituent) -> List[Relation]:
        return [self._edges[e] for e in self._outgoing[self._require(constituent)]]

    def get_constituents_covering_token(self, token_id: int) -> List[Constituent]:
        return [c for c in self._nodes.values() if c.covers_token(token_id)]

    def get_constituents_covering_span(self, start: int, end: int) -> List[Constituent]:
        """Constituents that cover at least one token of [start, end)."""
        return [c for c in self._nodes.values() if c.start < end and start < c.end]

    def has_relation(self, relation: Relation) -> bool:
        return relation.edge_id is not None and self._edges.get(relation.edge_id) is relation

    @property
    def relation_count(self) -> int:
        return len(self._edges)

    def _require(self, constituent: Constituent) -> int:
        if constituent.view is not self:
            raise ConstituentNotFoundError(constituent, self.view_name)
        return constituent.node_id

    def __contains__(self, constituent: object) -> bool:
        return isinstance(constituent, Constituent) and constituent.view is self

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Constituent]:
        return iter(self.get_constituents())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.view_name!r}, "
            f"constituents={len(self._nodes)}, relations={len(self._edges)})"
        )
