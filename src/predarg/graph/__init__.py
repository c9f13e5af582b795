"""Node/edge store for text annotation views."""

from .text import TextAnnotation
from .nodes import Constituent
from .edges import Relation
from .view import View
from .export import (
    # Data structures
    ViewFrames,
    # Column layouts
    NODE_COLUMNS,
    EDGE_COLUMNS,
    # Converters
    view_to_dataframes,
    view_to_networkx,
)

__all__ = [
    # Text substrate
    "TextAnnotation",
    # Graph elements
    "Constituent",
    "Relation",
    # Store
    "View",
    # Export
    "ViewFrames",
    "NODE_COLUMNS",
    "EDGE_COLUMNS",
    "view_to_dataframes",
    "view_to_networkx",
]
