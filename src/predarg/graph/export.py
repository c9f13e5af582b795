"""
Tabular and graph export of annotation views.

Views are converted to pandas DataFrames (one row per constituent, one row
per relation) for inspection and joins, or to a networkx MultiDiGraph for
graph analysis. Node ids and edge ids are the view's stable arena ids.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import networkx as nx
import pandas as pd

from predarg.graph.view import View

logger = logging.getLogger(__name__)

NODE_COLUMNS = ["node_id", "label", "view_name", "start", "end", "score", "surface", "attributes"]
EDGE_COLUMNS = ["edge_id", "source_node_id", "target_node_id", "label", "score"]


@dataclass
class ViewFrames:
    """
    DataFrame rendition of a view.

    Attributes:
        nodes_df: One row per constituent.
        edges_df: One row per relation.
        label_counts: Relation label to count.
    """

    nodes_df: pd.DataFrame
    edges_df: pd.DataFrame
    label_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Total number of rows across both frames."""
        return len(self.nodes_df) + len(self.edges_df)

    def __repr__(self) -> str:
        return f"ViewFrames(nodes={len(self.nodes_df)}, edges={len(self.edges_df)})"


def view_to_dataframes(view: View) -> ViewFrames:
    """
    Convert a view to node and edge DataFrames.

    Args:
        view: Any View.

    Returns:
        ViewFrames with columns NODE_COLUMNS and EDGE_COLUMNS.
    """
    node_rows: List[dict] = [c.to_dict() for c in view.get_constituents()]
    edge_rows: List[dict] = [r.to_dict() for r in view.get_relations()]

    nodes_df = pd.DataFrame(node_rows, columns=NODE_COLUMNS)
    edges_df = pd.DataFrame(edge_rows, columns=EDGE_COLUMNS)

    label_counts: Dict[str, int] = {}
    if not edges_df.empty:
        label_counts = {str(k): int(v) for k, v in edges_df["label"].value_counts().items()}

    logger.debug(
        f"Exported view '{view.view_name}': {len(nodes_df)} nodes, {len(edges_df)} edges"
    )
    return ViewFrames(nodes_df=nodes_df, edges_df=edges_df, label_counts=label_counts)


def view_to_networkx(view: View) -> nx.MultiDiGraph:
    """
    Convert a view to a networkx MultiDiGraph.

    Nodes are keyed by node id and carry label, span, surface and attributes.
    Edges are keyed by edge id and carry label and score.
    """
    graph = nx.MultiDiGraph(view_name=view.view_name, view_generator=view.view_generator)
    for constituent in view.get_constituents():
        row = constituent.to_dict()
        node_id = row.pop("node_id")
        graph.add_node(node_id, **row)
    for relation in view.get_relations():
        graph.add_edge(
            relation.source.node_id,
            relation.target.node_id,
            key=relation.edge_id,
            label=relation.relation_name,
            score=relation.score,
        )
    return graph


__all__ = [
    "NODE_COLUMNS",
    "EDGE_COLUMNS",
    "ViewFrames",
    "view_to_dataframes",
    "view_to_networkx",
]
