from __future__ import annotations

from typing import Union

import networkx as nx
import pandas as pd

from matrixgraph.graph.graph_store import MatrixGraph


def to_networkx(graph: MatrixGraph) -> Union[nx.Graph, nx.DiGraph]:
    """
    Copy a MatrixGraph into networkx.

    Directed kinds become a DiGraph, undirected kinds a Graph. Node
    insertion order follows the vertex store; every arc carries a
    ``weight`` attribute.
    """
    g = nx.DiGraph() if graph.directed else nx.Graph()
    g.graph["kind"] = graph.kind.value
    g.add_nodes_from(graph.vertices())
    for arc in graph.arcs():
        g.add_edge(arc.source, arc.target, weight=arc.weight)
    return g


def to_dataframe(graph: MatrixGraph) -> pd.DataFrame:
    """
    Labelled matrix; rows are sources, columns are targets.

    Network kinds carry arc weights. Graph kinds store no weight, so
    occupied cells are written as 1, which GraphBuilder.from_weight_matrix
    reads back as arcs.
    """
    labels = graph.vertices()
    if graph.weighted:
        values = graph.adjacency_matrix()
    else:
        values = graph.occupancy_matrix().astype(int)
    return pd.DataFrame(values, index=labels, columns=labels)
