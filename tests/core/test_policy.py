from __future__ import annotations

import pytest

from predarg.graph.edges import Relation
from predarg.graph.nodes import Constituent
from predarg.graph.text import TextAnnotation
from predarg.graph.view import View
from predarg.policy import (
    DEFAULT_PREDICATE_POLICY,
    PREDICATE_POLICIES,
    get_predicate_policy,
    has_no_incoming_relations,
    has_outgoing_relations,
    is_root_with_arguments,
)


@pytest.fixture
def nodes():
    text = TextAnnotation(["She", "runs", "fast", "today"])
    view = View("SRL_VERB", text)
    runs, she, fast, today = (
        Constituent("X", "SRL_VERB", text, i, i + 1) for i in (1, 0, 2, 3)
    )
    for node in (runs, she, fast, today):
        view.add_constituent(node)
    view.add_relation(Relation("A0", runs, she))
    view.add_relation(Relation("AM-MNR", runs, fast))
    return runs, she, fast, today


def test_default_policy_is_no_incoming():
    assert DEFAULT_PREDICATE_POLICY is has_no_incoming_relations


def test_builtin_policies(nodes):
    runs, she, fast, today = nodes
    assert [has_no_incoming_relations(n) for n in nodes] == [True, False, False, True]
    assert [has_outgoing_relations(n) for n in nodes] == [True, False, False, False]
    assert [is_root_with_arguments(n) for n in nodes] == [True, False, False, False]


@pytest.mark.parametrize("name", sorted(PREDICATE_POLICIES))
def test_lookup_by_name(name):
    assert get_predicate_policy(name) is PREDICATE_POLICIES[name]


def test_lookup_normalizes_case_and_whitespace():
    assert get_predicate_policy("  Root_With_Arguments ") is is_root_with_arguments


def test_unknown_policy_raises_key_error():
    with pytest.raises(KeyError):
        get_predicate_policy("no_such_policy")
