"""
Predicate detection policies.

When no predicate has been registered explicitly, a predicate-argument view
falls back to a policy that decides, node by node, whether a constituent is a
predicate. A policy is any callable taking a Constituent and returning bool.
"""

from __future__ import annotations

from typing import Callable, Dict

from predarg.graph.nodes import Constituent

PredicatePolicy = Callable[[Constituent], bool]


def has_no_incoming_relations(constituent: Constituent) -> bool:
    """Treat every node without incoming relations as a predicate."""
    return len(constituent.get_incoming_relations()) == 0


def has_outgoing_relations(constituent: Constituent) -> bool:
    """Treat every node with at least one outgoing relation as a predicate."""
    return len(constituent.get_outgoing_relations()) > 0


def is_root_with_arguments(constituent: Constituent) -> bool:
    """No incoming relations and at least one outgoing relation."""
    return has_no_incoming_relations(constituent) and has_outgoing_relations(constituent)


DEFAULT_PREDICATE_POLICY: PredicatePolicy = has_no_incoming_relations

PREDICATE_POLICIES: Dict[str, PredicatePolicy] = {
    "no_incoming": has_no_incoming_relations,
    "has_outgoing": has_outgoing_relations,
    "root_with_arguments": is_root_with_arguments,
}


def get_predicate_policy(name: str) -> PredicatePolicy:
    """Look up a named policy."""
    key = str(name).strip().lower()
    if key not in PREDICATE_POLICIES:
        raise KeyError(
            f"Unknown predicate policy '{name}'. Known: {sorted(PREDICATE_POLICIES)}"
        )
    return PREDICATE_POLICIES[key]


__all__ = [
    "PredicatePolicy",
    "has_no_incoming_relations",
    "has_outgoing_relations",
    "is_root_with_arguments",
    "DEFAULT_PREDICATE_POLICY",
    "PREDICATE_POLICIES",
    "get_predicate_policy",
]
