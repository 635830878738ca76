from __future__ import annotations

from typing import Hashable, Iterator, Optional, Tuple

import numpy as np

from matrixgraph.graph.graph_schema import NOT_FOUND
from matrixgraph.graph.graph_store import MatrixGraph

AdjacentResult = Tuple[Optional[Hashable], bool]


class GraphQueryEngine:
    """
    Ordered adjacency scans over a MatrixGraph.

    Neighbors are always reported in ascending matrix-index order, which
    is what makes traversal output deterministic.
    """

    def __init__(self, store: MatrixGraph) -> None:
        self.store = store

    def locate_vertex(self, label: Hashable) -> int:
        return self.store.locate_vertex(label)

    def first_adjacent(self, vertex: Hashable) -> AdjacentResult:
        index = self.store.locate_vertex(vertex)
        if index == NOT_FOUND:
            return None, False
        return self._scan(index, 0)

    def next_adjacent(self, vertex: Hashable, after: Hashable) -> AdjacentResult:
        """
        Return the first neighbor of ``vertex`` whose index is strictly
        greater than the index of ``after``.
        """
        index = self.store.locate_vertex(vertex)
        after_index = self.store.locate_vertex(after)
        if index == NOT_FOUND or after_index == NOT_FOUND:
            return None, False
        return self._scan(index, after_index + 1)

    def neighbors(self, vertex: Hashable) -> Iterator[Hashable]:
        w, found = self.first_adjacent(vertex)
        while found:
            yield w
            w, found = self.next_adjacent(vertex, w)

    # -------------------- Degrees --------------------

    def out_degree(self, vertex: Hashable) -> int:
        index = self.store.locate_vertex(vertex)
        if index == NOT_FOUND:
            return 0
        return int(self.store.row(index).sum())

    def in_degree(self, vertex: Hashable) -> int:
        index = self.store.locate_vertex(vertex)
        if index == NOT_FOUND:
            return 0
        return int(self.store.column(index).sum())

    # -------------------- Internals --------------------

    def _scan(self, index: int, start: int) -> AdjacentResult:
        row = self.store.row(index)
        hits = np.flatnonzero(row[start:])
        if hits.size == 0:
            return None, False
        return self.store.vertex_at(start + int(hits[0])), True
