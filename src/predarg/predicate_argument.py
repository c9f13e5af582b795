"""
Predicate-argument view over a text annotation.

A PredicateArgumentView is a View whose relations run from predicates to
their arguments (semantic roles). On top of the node/edge store it tracks
which constituents are predicates and provides:

- Atomic registration of a predicate with its labeled, scored arguments
- Policy-based predicate discovery when nothing was registered explicitly
- Argument lookup, lemma and sense lookup
- A canonical text rendering used for golden-file comparison
- The one-hop predicate/argument closure and two removal protocols over it

Predicate state:
    Explicitly registered predicates are kept in registration order, and
    duplicates are allowed unless the view rejects them. When none are
    registered, get_predicates() runs the discovery policy once and caches
    the result. The cache is two-state (not computed / computed) and any
    structural mutation of the view resets it to "not computed", so an empty
    computed result is distinguishable from a result that was never computed.
    Registering a predicate while a discovered result is cached keeps the
    discovered predicates and appends the new one after them.
"""

import logging
from typing import Any, List, Optional, Sequence

import networkx as nx

from predarg.config import ViewConfig
from predarg.constants import (
    DEFAULT_VIEW_SCORE,
    LEMMA_ATTRIBUTE,
    RENDER_INDENT,
    SENSE_ATTRIBUTE,
)
from predarg.errors import (
    ArityMismatchError,
    DuplicatePredicateError,
    ForeignConstituentError,
    PredicateNotFoundError,
)
from predarg.graph.edges import Relation
from predarg.graph.export import ViewFrames, view_to_dataframes, view_to_networkx
from predarg.graph.nodes import Constituent
from predarg.graph.text import TextAnnotation
from predarg.graph.view import View
from predarg.policy import DEFAULT_PREDICATE_POLICY, PredicatePolicy
from predarg.utils.serialize import normalize_labels, normalize_scores

logger = logging.getLogger(__name__)


class PredicateArgumentView(View):
    """
    A view of predicates and their arguments.

    Args:
        view_name: Name of the view (e.g., "SRL_VERB").
        text: The TextAnnotation being annotated.
        view_generator: Name of the annotator. Defaults to "<view_name>-annotator".
        score: View-level confidence score.
        predicate_policy: Callable deciding whether a constituent is a predicate
            when none were registered. Defaults to "no incoming relations".
        reject_duplicate_predicates: Raise DuplicatePredicateError when a
            registered predicate is registered again.
        lemma_attribute: Attribute key holding an explicit lemma.
        sense_attribute: Attribute key holding an explicit sense.
    """

    def __init__(
        self,
        view_name: str,
        text: TextAnnotation,
        view_generator: Optional[str] = None,
        score: float = DEFAULT_VIEW_SCORE,
        predicate_policy: Optional[PredicatePolicy] = None,
        reject_duplicate_predicates: bool = False,
        lemma_attribute: str = LEMMA_ATTRIBUTE,
        sense_attribute: str = SENSE_ATTRIBUTE,
    ):
        self._registered: List[Constituent] = []
        self._discovered: Optional[List[Constituent]] = None
        super().__init__(view_name, text, view_generator=view_generator, score=score)
        self.predicate_policy = predicate_policy or DEFAULT_PREDICATE_POLICY
        self.reject_duplicate_predicates = reject_duplicate_predicates
        self.lemma_attribute = lemma_attribute
        self.sense_attribute = sense_attribute

    @classmethod
    def from_config(
        cls,
        config: ViewConfig,
        text: TextAnnotation,
        predicate_policy: Optional[PredicatePolicy] = None,
    ) -> "PredicateArgumentView":
        """Create a view from a ViewConfig."""
        return cls(
            config.view_name,
            text,
            view_generator=config.view_generator,
            score=config.score,
            predicate_policy=predicate_policy,
            reject_duplicate_predicates=config.reject_duplicate_predicates,
            lemma_attribute=config.lemma_attribute,
            sense_attribute=config.sense_attribute,
        )

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_predicate_arguments(
        self,
        predicate: Constituent,
        args: Sequence[Constituent],
        relation_labels: Any,
        scores: Any,
    ) -> List[Relation]:
        """
        Register a predicate together with its arguments.

        One relation is created from the predicate to each argument, carrying
        the label and score at the same position. All checks run before the
        view is touched, so a rejected call leaves it unchanged.

        Args:
            predicate: The predicate constituent.
            args: Argument constituents.
            relation_labels: One label per argument (list, tuple or array).
            scores: One score per argument (list, tuple or numpy array).

        Returns:
            The created relations, in argument order.

        Raises:
            ArityMismatchError: If the three sequences differ in length.
            DuplicatePredicateError: If duplicates are rejected and the
                predicate is already registered.
            ForeignConstituentError: If a constituent belongs elsewhere.
            TypeError: If labels or scores are a bare value, not a sequence.
        """
        args = list(args)
        labels = normalize_labels(relation_labels)
        score_list = normalize_scores(scores)

        if len(args) != len(labels):
            raise ArityMismatchError("relations", len(args), len(labels))
        if len(args) != len(score_list):
            raise ArityMismatchError("scores", len(args), len(score_list))

        known = self._registered or self._discovered or []
        if predicate in known:
            if self.reject_duplicate_predicates:
                raise DuplicatePredicateError(predicate)
            logger.warning(f"Predicate {predicate} registered more than once in '{self.view_name}'")

        for constituent in [predicate] + args:
            self._check_attachable(constituent)

        if not self._registered and self._discovered:
            self._registered = list(self._discovered)
        self.add_constituent(predicate)
        self._registered.append(predicate)

        relations = []
        for arg, label, score in zip(args, labels, score_list):
            self.add_constituent(arg)
            relation = Relation(label, predicate, arg, score)
            self.add_relation(relation)
            relations.append(relation)

        logger.debug(
            f"Registered predicate {predicate} with {len(relations)} arguments "
            f"in '{self.view_name}'"
        )
        return relations

    def _check_attachable(self, constituent: Constituent) -> None:
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

    # =========================================================================
    # PREDICATES
    # =========================================================================

    def get_predicates(self) -> List[Constituent]:
        """
        Return the predicates of this view.

        Registered predicates are returned in registration order. If none were
        registered, the predicate policy is applied to every constituent and
        the result is cached until the view's structure changes.
        """
        if self._registered:
            return list(self._registered)

        if self._discovered is None:
            self._discovered = [c for c in self.get_constituents() if self.predicate_policy(c)]
            logger.debug(
                f"Discovered {len(self._discovered)} predicates among "
                f"{len(self)} constituents in '{self.view_name}'"
            )
        return list(self._discovered)

    @property
    def predicates_computed(self) -> bool:
        """True if predicates are registered or discovery has been cached."""
        return bool(self._registered) or self._discovered is not None

    def invalidate_predicates(self) -> None:
        """Drop the discovery cache. Registered predicates are kept."""
        self._discovered = None

    def is_predicate(self, constituent: Constituent) -> bool:
        return constituent in self.get_predicates()

    def get_arguments(self, predicate: Constituent) -> List[Relation]:
        """
        Return every outgoing relation of a predicate.

        Raises:
            PredicateNotFoundError: If the constituent is not a predicate of this view.
        """
        if not self.is_predicate(predicate):
            raise PredicateNotFoundError(predicate)
        return predicate.get_outgoing_relations()

    def get_predicate_lemma(self, predicate: Constituent) -> str:
        if predicate.has_attribute(self.lemma_attribute):
            return predicate.get_attribute(self.lemma_attribute)
        return predicate.get_tokenized_surface_form().lower().strip()

    def get_predicate_sense(self, predicate: Constituent) -> str:
        if predicate.has_attribute(self.sense_attribute):
            return predicate.get_attribute(self.sense_attribute)
        return ""

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render(self) -> str:
        """
        Canonical text form of the view.

        Predicates are ordered by span start, each followed by its relations
        ordered by label:

            eat:01
                A0: John
                A1: an apple[Case=acc ]
        """
        lines = []
        for predicate in sorted(self.get_predicates(), key=lambda c: c.start):
            lines.append(
                f"{self.get_predicate_lemma(predicate)}:{self.get_predicate_sense(predicate)}\n"
            )
            outgoing = sorted(predicate.get_outgoing_relations(), key=lambda r: r.relation_name)
            for relation in outgoing:
                target = relation.target
                line = f"{RENDER_INDENT}{relation.relation_name}: {target.get_tokenized_surface_form()}"
                keys = target.get_attribute_keys()
                if keys:
                    line += "[" + "".join(
                        f"{key}={target.get_attribute(key)} " for key in sorted(keys)
                    ) + "]"
                lines.append(line + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    # =========================================================================
    # CLOSURE
    # =========================================================================

    def get_predicate_argument_constituents(self) -> List[Constituent]:
        """
        Predicates plus every target of a predicate's outgoing relation.

        Only one hop is followed. The frontier is collected before merging, so
        arguments of arguments are never included. Order: predicates first,
        then arguments, without duplicates.

        The closure starts from get_predicates(), so on a view without
        registered predicates it runs discovery first.
        """
        predicates = self.get_predicates()

        frontier = []
        for predicate in predicates:
            for relation in predicate.get_outgoing_relations():
                frontier.append(relation.target)

        closure = []
        seen = set()
        for constituent in predicates + frontier:
            if constituent not in seen:
                seen.add(constituent)
                closure.append(constituent)
        return closure

    def get_predicate_argument_relations(self) -> List[Relation]:
        """
        Every relation incoming to or outgoing from a closure constituent.

        This includes relations between two arguments, or between an argument
        and a constituent outside the closure, when such relations exist.
        Ordered by edge id.
        """
        relations = {}
        for constituent in self.get_predicate_argument_constituents():
            for relation in constituent.get_incoming_relations():
                relations[relation.edge_id] = relation
            for relation in constituent.get_outgoing_relations():
                relations[relation.edge_id] = relation
        return [relations[edge_id] for edge_id in sorted(relations)]

    # =========================================================================
    # REMOVAL
    # =========================================================================

    def remove_constituent(self, constituent: Constituent) -> bool:
        removed = super().remove_constituent(constituent)
        if removed and constituent in self._registered:
            self._registered = [p for p in self._registered if p is not constituent]
        return removed

    def remove_all_constituents_and_relations(self) -> None:
        """
        Remove every closure constituent and every closure relation from the view.

        Without registered predicates this runs discovery, so every node the
        predicate policy accepts, and its arguments, is removed.
        """
        relations = self.get_predicate_argument_relations()
        constituents = self.get_predicate_argument_constituents()

        removed_nodes = 0
        for constituent in constituents:
            if self.remove_constituent(constituent):
                removed_nodes += 1

        for relation in relations:
            self.remove_relation(relation)

        logger.debug(
            f"Removed {removed_nodes} constituents and {len(relations)} relations "
            f"from '{self.view_name}'"
        )

    def remove_all_relations(self) -> None:
        """
        Remove every relation touching a closure constituent. Constituents stay.

        Without registered predicates this runs discovery, so with the default
        policy every root node loses its relations.
        """
        constituents = self.get_predicate_argument_constituents()
        removed = 0
        for constituent in constituents:
            for relation in constituent.get_incoming_relations():
                removed += self.remove_relation(relation)
            for relation in constituent.get_outgoing_relations():
                removed += self.remove_relation(relation)
            constituent.remove_all_incoming_relations()
            constituent.remove_all_outgoing_relations()

        logger.debug(
            f"Removed {removed} relations from {len(constituents)} constituents "
            f"in '{self.view_name}'"
        )

    def _on_structure_changed(self) -> None:
        self._discovered = None

    # =========================================================================
    # EXPORT
    # =========================================================================

    def to_frames(self) -> ViewFrames:
        """DataFrames of this view with an is_predicate column on nodes."""
        frames = view_to_dataframes(self)
        predicate_ids = {p.node_id for p in self.get_predicates()}
        frames.nodes_df["is_predicate"] = frames.nodes_df["node_id"].isin(predicate_ids)
        return frames

    def to_networkx(self) -> nx.MultiDiGraph:
        """networkx graph of this view with an is_predicate node attribute."""
        graph = view_to_networkx(self)
        predicate_ids = {p.node_id for p in self.get_predicates()}
        for node_id, data in graph.nodes(data=True):
            data["is_predicate"] = node_id in predicate_ids
        return graph
