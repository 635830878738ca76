from __future__ import annotations

import pytest

from matrixgraph.graph.graph_builder import GraphBuilder
from matrixgraph.graph.graph_schema import GraphKind
from matrixgraph.graph.graph_store import MatrixGraph


UDG_5 = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 0, 1],
    [0, 1, 0, 1, 1],
    [1, 0, 1, 0, 0],
    [0, 1, 1, 0, 0],
]

UDN_5 = [
    [0, 10, 0, 11, 0],
    [10, 0, 12, 0, 15],
    [0, 12, 0, 14, 13],
    [11, 0, 14, 0, 0],
    [0, 15, 13, 0, 0],
]

DG_4 = [
    [0, 1, 1, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 1],
    [1, 0, 0, 0],
]

DN_4 = [
    [0, 11, 12, 0],
    [0, 0, 0, 0],
    [0, 0, 0, 13],
    [14, 0, 0, 0],
]

UDG_8 = [
    [0, 1, 1, 0, 0, 0, 0, 0],
    [1, 0, 0, 1, 1, 0, 0, 0],
    [1, 0, 0, 0, 0, 1, 1, 0],
    [0, 1, 0, 0, 0, 0, 0, 1],
    [0, 1, 0, 0, 0, 0, 0, 1],
    [0, 0, 1, 0, 0, 0, 1, 0],
    [0, 0, 1, 0, 0, 1, 0, 0],
    [0, 0, 0, 1, 1, 0, 0, 0],
]

# Lower triangle disagrees with the upper one; the first insertion of
# each undirected pair wins.
UDN_8 = [
    [0, 11, 12, 0, 0, 0, 0, 0],
    [11, 0, 0, 13, 14, 0, 0, 0],
    [12, 0, 0, 0, 0, 15, 16, 0],
    [0, 1, 0, 0, 0, 0, 0, 17],
    [0, 1, 0, 0, 0, 0, 0, 18],
    [0, 0, 1, 0, 0, 0, 1, 0],
    [0, 0, 1, 0, 0, 1, 0, 0],
    [0, 0, 0, 1, 1, 0, 0, 0],
]

ALL_KINDS = list(GraphKind)

# (kind, matrix, vertex count, edge count)
INSERT_CASES = [
    (GraphKind.UNDIRECTED_GRAPH, UDG_5, 5, 6),
    (GraphKind.UNDIRECTED_NETWORK, UDN_5, 5, 6),
    (GraphKind.DIRECTED_GRAPH, DG_4, 4, 4),
    (GraphKind.DIRECTED_NETWORK, DN_4, 4, 4),
]


def labels(n: int) -> list[str]:
    return [f"V{i + 1}" for i in range(n)]


@pytest.fixture()
def build():
    def _build(kind, matrix) -> MatrixGraph:
        return GraphBuilder.from_weight_matrix(matrix, kind=kind)

    return _build
