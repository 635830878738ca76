from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterator, List, Optional

import numpy as np

from matrixgraph.graph.graph_schema import Arc, GraphKind, NOT_FOUND

logger = logging.getLogger("matrixgraph.store")


class MatrixGraph:
    """
    Graph backed by a dense adjacency matrix.

    The vertex store is an ordered list of unique labels; a vertex's
    position in that list is its row and column in the matrix. The matrix
    is kept as two square numpy arrays of the same shape: a boolean
    occupancy table and a weight table.

    Indices are positional. Deleting the vertex at index k compacts the
    matrix and shifts every higher index down by one, so callers must
    re-locate vertices by label after any mutation.
    """

    def __init__(self, kind: Any) -> None:
        self._kind = GraphKind.coerce(kind)
        self._vertices: List[Hashable] = []
        self._index: Dict[Hashable, int] = {}
        self._present = np.zeros((0, 0), dtype=bool)
        self._weights = np.zeros((0, 0), dtype=float)
        self._ne = 0

    # -------------------- Configuration --------------------

    @property
    def kind(self) -> GraphKind:
        return self._kind

    @property
    def directed(self) -> bool:
        return self._kind.is_directed

    @property
    def weighted(self) -> bool:
        return self._kind.is_network

    # -------------------- Vertices --------------------

    def locate_vertex(self, label: Hashable) -> int:
        """
        Return the matrix index of ``label`` or NOT_FOUND.
        """
        return self._index.get(label, NOT_FOUND)

    def has_vertex(self, label: Hashable) -> bool:
        return label in self._index

    def vertex_at(self, index: int) -> Hashable:
        return self._vertices[index]

    def vertices(self) -> List[Hashable]:
        return list(self._vertices)

    def insert_vertex(self, label: Hashable) -> bool:
        if label in self._index:
            logger.debug("insert_vertex %r: already present", label)
            return False

        n = len(self._vertices)
        self._present = np.pad(self._present, ((0, 1), (0, 1)), constant_values=False)
        self._weights = np.pad(self._weights, ((0, 1), (0, 1)), constant_values=0.0)
        self._vertices.append(label)
        self._index[label] = n

        logger.debug("insert_vertex %r at index %d", label, n)
        return True

    def delete_vertex(self, label: Hashable) -> bool:
        index = self.locate_vertex(label)
        if index == NOT_FOUND:
            logger.debug("delete_vertex %r: not found", label)
            return False

        # Row and column share the diagonal cell; count it once.
        cleared = int(self._present[index, :].sum() + self._present[:, index].sum())
        if self._present[index, index]:
            cleared -= 1
        self._ne -= cleared

        self._present = np.delete(np.delete(self._present, index, axis=0), index, axis=1)
        self._weights = np.delete(np.delete(self._weights, index, axis=0), index, axis=1)
        del self._vertices[index]
        self._index = {v: i for i, v in enumerate(self._vertices)}

        logger.debug(
            "delete_vertex %r at index %d; cleared %d cells",
            label,
            index,
            cleared,
        )
        return True

    # -------------------- Arcs --------------------

    def insert_arc(self, source: Hashable, target: Hashable, weight: float = 0) -> bool:
        i, j = self.locate_vertex(source), self.locate_vertex(target)
        if i == NOT_FOUND or j == NOT_FOUND:
            logger.debug("insert_arc %r->%r: endpoint not found", source, target)
            return False

        value = weight if self.weighted else 0
        self._occupy(i, j, value)
        if not self.directed:
            self._occupy(j, i, value)
        return True

    def delete_arc(self, source: Hashable, target: Hashable) -> bool:
        i, j = self.locate_vertex(source), self.locate_vertex(target)
        if i == NOT_FOUND or j == NOT_FOUND:
            logger.debug("delete_arc %r->%r: endpoint not found", source, target)
            return False

        self._vacate(i, j)
        if not self.directed:
            self._vacate(j, i)
        return True

    def has_arc(self, source: Hashable, target: Hashable) -> bool:
        i, j = self.locate_vertex(source), self.locate_vertex(target)
        if i == NOT_FOUND or j == NOT_FOUND:
            return False
        return bool(self._present[i, j])

    def get_arc(self, source: Hashable, target: Hashable) -> Optional[Arc]:
        if not self.has_arc(source, target):
            return None
        i, j = self._index[source], self._index[target]
        return Arc(source=source, target=target, weight=self._weights[i, j].item())

    def arcs(self) -> Iterator[Arc]:
        """
        Yield every occupied cell in row-major order.

        Undirected edges appear once per direction.
        """
        for i, j in zip(*np.nonzero(self._present)):
            yield Arc(
                source=self._vertices[i],
                target=self._vertices[j],
                weight=self._weights[i, j].item(),
            )

    def _occupy(self, i: int, j: int, weight: float) -> None:
        # Re-inserting into an occupied cell leaves it and the count alone.
        if self._present[i, j]:
            return
        self._present[i, j] = True
        self._weights[i, j] = weight
        self._ne += 1

    def _vacate(self, i: int, j: int) -> None:
        if not self._present[i, j]:
            return
        self._present[i, j] = False
        self._weights[i, j] = 0.0
        self._ne -= 1

    # -------------------- Matrix views --------------------

    def row(self, index: int) -> np.ndarray:
        return self._present[index, :].copy()

    def column(self, index: int) -> np.ndarray:
        return self._present[:, index].copy()

    def occupancy_matrix(self) -> np.ndarray:
        return self._present.copy()

    def adjacency_matrix(self) -> np.ndarray:
        """
        Weight matrix copy; empty cells are 0.

        For graph kinds occupied cells are 0 as well, so use
        occupancy_matrix() to tell presence apart.
        """
        return self._weights.copy()

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        if self.directed:
            return self._ne
        return self._ne // 2

    def entry_count(self) -> int:
        return self._ne

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __repr__(self) -> str:
        return (
            f"MatrixGraph(kind={self._kind.value!r}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )

    # -------------------- Cloning --------------------

    def clone(self) -> "MatrixGraph":
        g = MatrixGraph(self._kind)
        g._vertices = list(self._vertices)
        g._index = dict(self._index)
        g._present = self._present.copy()
        g._weights = self._weights.copy()
        g._ne = self._ne
        return g
