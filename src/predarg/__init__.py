"""
predarg: predicate-argument views over text annotation graphs.

Import from this module for the public surface; submodules hold the details:
- graph: TextAnnotation, Constituent, Relation, View and export helpers
- predicate_argument: PredicateArgumentView
- policy: predicate detection policies
- config: ViewConfig
- errors: exception taxonomy
"""

from predarg.config import ViewConfig
from predarg.errors import (
    PredArgError,
    ArityMismatchError,
    PredicateNotFoundError,
    DuplicatePredicateError,
    ConstituentNotFoundError,
    ForeignConstituentError,
    InvalidSpanError,
)
from predarg.graph import (
    TextAnnotation,
    Constituent,
    Relation,
    View,
    ViewFrames,
    view_to_dataframes,
    view_to_networkx,
)
from predarg.policy import (
    PredicatePolicy,
    DEFAULT_PREDICATE_POLICY,
    has_no_incoming_relations,
    get_predicate_policy,
)
from predarg.predicate_argument import PredicateArgumentView

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ViewConfig",
    # Errors
    "PredArgError",
    "ArityMismatchError",
    "PredicateNotFoundError",
    "DuplicatePredicateError",
    "ConstituentNotFoundError",
    "ForeignConstituentError",
    "InvalidSpanError",
    # Graph
    "TextAnnotation",
    "Constituent",
    "Relation",
    "View",
    "ViewFrames",
    "view_to_dataframes",
    "view_to_networkx",
    # Policies
    "PredicatePolicy",
    "DEFAULT_PREDICATE_POLICY",
    "has_no_incoming_relations",
    "get_predicate_policy",
    # Core
    "PredicateArgumentView",
]
