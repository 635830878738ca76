"""
matrixgraph
===========

A graph abstract data type backed by a dense adjacency matrix.

Supports directed and undirected graphs and weighted networks, with
vertex/arc mutation, ordered adjacency queries, and depth-first,
breadth-first and depth-first spanning-forest traversals.

Public API:
- create_graph / MatrixGraph
- GraphQueryEngine
- GraphTraversal
- GraphBuilder
"""

from matrixgraph.graph.graph_schema import Arc, GraphKind, GraphKindError, NOT_FOUND
from matrixgraph.graph.graph_store import MatrixGraph
from matrixgraph.graph.graph_query import GraphQueryEngine
from matrixgraph.graph.graph_forest import SpanningForest
from matrixgraph.graph.graph_traversal import GraphTraversal
from matrixgraph.graph.graph_builder import GraphBuilder, create_graph
from matrixgraph.config import MatrixGraphConfig, load_settings

__all__ = [
    "Arc",
    "GraphKind",
    "GraphKindError",
    "NOT_FOUND",
    "MatrixGraph",
    "GraphQueryEngine",
    "SpanningForest",
    "GraphTraversal",
    "GraphBuilder",
    "create_graph",
    "MatrixGraphConfig",
    "load_settings",
]

__version__ = "0.1.0"
