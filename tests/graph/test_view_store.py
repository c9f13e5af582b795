from __future__ import annotations

import pytest

from predarg.errors import (
    ConstituentNotFoundError,
    ForeignConstituentError,
    InvalidSpanError,
)
from predarg.graph.edges import Relation
from predarg.graph.nodes import Constituent
from predarg.graph.text import TextAnnotation
from predarg.graph.view import View


@pytest.fixture
def text():
    return TextAnnotation(["The", "cat", "sat", "on", "the", "mat", "."])


@pytest.fixture
def view(text):
    return View("TEST", text)


def _node(text, start, end, label="X"):
    return Constituent(label, "TEST", text, start, end)


def _assert_consistent(view):
    """Every stored relation is in both endpoint lists and nowhere else."""
    relations = view.get_relations()
    for relation in relations:
        assert relation in relation.source.get_outgoing_relations()
        assert relation in relation.target.get_incoming_relations()
    for constituent in view.get_constituents():
        for relation in constituent.get_outgoing_relations():
            assert relation in relations
            assert relation.source is constituent
        for relation in constituent.get_incoming_relations():
            assert relation in relations
            assert relation.target is constituent


def test_default_generator_name(text):
    view = View("SRL_VERB", text)
    assert view.view_generator == "SRL_VERB-annotator"
    assert view.score == 1.0


def test_add_relation_updates_all_three_locations(view, text):
    a, b = _node(text, 0, 2), _node(text, 2, 3)
    view.add_constituent(a)
    view.add_constituent(b)
    relation = Relation("nsubj", b, a, 0.7)
    view.add_relation(relation)

    assert view.get_relations() == [relation]
    assert b.get_outgoing_relations() == [relation]
    assert a.get_incoming_relations() == [relation]
    assert a.get_outgoing_relations() == []
    assert relation.edge_id is not None
    _assert_consistent(view)


def test_add_relation_requires_registered_endpoints(view, text):
    a, b = _node(text, 0, 1), _node(text, 1, 2)
    view.add_constituent(a)
    with pytest.raises(ConstituentNotFoundError):
        view.add_relation(Relation("r", a, b))
    assert view.relation_count == 0
    assert a.get_outgoing_relations() == []


def test_add_constituent_is_idempotent(view, text):
    a = _node(text, 0, 1)
    view.add_constituent(a)
    node_id = a.node_id
    view.add_constituent(a)
    assert len(view) == 1
    assert a.node_id == node_id


def test_constituent_from_other_view_is_rejected(view, text):
    other = View("OTHER", text)
    a = _node(text, 0, 1)
    other.add_constituent(a)
    with pytest.raises(ForeignConstituentError):
        view.add_constituent(a)


def test_constituent_from_other_text_is_rejected(view):
    a = _node(TextAnnotation(["Hello"]), 0, 1)
    with pytest.raises(ForeignConstituentError):
        view.add_constituent(a)


def test_invalid_span_is_rejected(text):
    with pytest.raises(InvalidSpanError):
        _node(text, 3, 3)
    with pytest.raises(InvalidSpanError):
        _node(text, 5, 9)


def test_remove_relation(view, text):
    a, b = _node(text, 0, 1), _node(text, 1, 2)
    view.add_constituent(a)
    view.add_constituent(b)
    relation = Relation("r", a, b)
    view.add_relation(relation)

    assert view.remove_relation(relation) is True
    assert view.get_relations() == []
    assert a.get_outgoing_relations() == []
    assert b.get_incoming_relations() == []
    assert view.remove_relation(relation) is False


def test_remove_constituent_cascades_to_all_incident_relations(view, text):
    a, b, c = _node(text, 0, 1), _node(text, 1, 2), _node(text, 2, 3)
    for node in (a, b, c):
        view.add_constituent(node)
    ab = Relation("r1", a, b)
    cb = Relation("r2", c, b)
    ac = Relation("r3", a, c)
    for relation in (ab, cb, ac):
        view.add_relation(relation)

    assert view.remove_constituent(b) is True

    assert b not in view
    assert b.get_incoming_relations() == []
    assert view.get_relations() == [ac]
    assert a.get_outgoing_relations() == [ac]
    assert c.get_outgoing_relations() == []
    _assert_consistent(view)
    assert view.remove_constituent(b) is False


def test_remove_constituent_with_self_loop(view, text):
    a = _node(text, 0, 1)
    view.add_constituent(a)
    view.add_relation(Relation("self", a, a))

    view.remove_constituent(a)

    assert len(view) == 0
    assert view.relation_count == 0


def test_node_clears_its_own_adjacency(view, text):
    a, b = _node(text, 0, 1), _node(text, 1, 2)
    view.add_constituent(a)
    view.add_constituent(b)
    view.add_relation(Relation("r", a, b))
    view.add_relation(Relation("s", b, a))

    a.remove_all_outgoing_relations()
    assert a.get_outgoing_relations() == []
    assert len(a.get_incoming_relations()) == 1

    a.remove_all_incoming_relations()
    assert view.relation_count == 0
    _assert_consistent(view)


def test_spans_and_surface_forms(view, text):
    mat = _node(text, 4, 6)
    view.add_constituent(mat)
    view.add_constituent(_node(text, 0, 2))

    assert mat.length == 2
    assert mat.get_tokenized_surface_form() == "the mat"
    assert mat.get_surface_form() == "the mat"
    assert view.get_constituents_covering_token(5) == [mat]
    assert len(view.get_constituents_covering_span(1, 5)) == 2


def test_surface_form_uses_raw_text():
    text = TextAnnotation(["Hello", ",", "world"], text="Hello, world")
    node = Constituent("X", "TEST", text, 0, 3)
    assert node.get_surface_form() == "Hello, world"
    assert node.get_tokenized_surface_form() == "Hello , world"


def test_attributes(text):
    node = _node(text, 0, 1)
    node.add_attribute("Case", "nom")
    assert node.has_attribute("Case")
    assert node.get_attribute("Case") == "nom"
    assert node.get_attribute_keys() == {"Case"}
    assert node.get_attribute("Missing") is None
