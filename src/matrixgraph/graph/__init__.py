"""
Graph subsystem for matrixgraph.

Dense adjacency-matrix graphs in four kinds (directed or undirected,
plain or weighted), with ordered adjacency scans and depth-first,
breadth-first and spanning-forest traversals.
"""

from matrixgraph.graph.graph_schema import Arc, GraphKind, GraphKindError, NOT_FOUND
from matrixgraph.graph.graph_store import MatrixGraph
from matrixgraph.graph.graph_query import GraphQueryEngine
from matrixgraph.graph.graph_forest import ForestNode, SpanningForest
from matrixgraph.graph.graph_traversal import (
    GraphTraversal,
    breadth_first_traverse,
    build_depth_first_forest,
    depth_first_traverse,
)
from matrixgraph.graph.graph_builder import GraphBuilder, create_graph
from matrixgraph.graph.graph_export import to_dataframe, to_networkx

__all__ = [
    "Arc",
    "GraphKind",
    "GraphKindError",
    "NOT_FOUND",
    "MatrixGraph",
    "GraphQueryEngine",
    "ForestNode",
    "SpanningForest",
    "GraphTraversal",
    "depth_first_traverse",
    "breadth_first_traverse",
    "build_depth_first_forest",
    "GraphBuilder",
    "create_graph",
    "to_networkx",
    "to_dataframe",
]
