from __future__ import annotations

import logging
import time
from typing import Any, Hashable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from matrixgraph.config.settings import MatrixGraphConfig
from matrixgraph.graph.graph_schema import Arc, GraphKind
from matrixgraph.graph.graph_store import MatrixGraph

ArcSpec = Union[Arc, Tuple[Hashable, Hashable], Tuple[Hashable, Hashable, float]]
MatrixLike = Union[Sequence[Sequence[float]], np.ndarray, pd.DataFrame]


class GraphBuilder:
    """
    Populates a MatrixGraph from structured inputs.
    """

    def __init__(
        self,
        graph: MatrixGraph,
        config: Optional[MatrixGraphConfig] = None,
    ) -> None:
        self.graph = graph
        self.config = config or MatrixGraphConfig()

    def add_vertices(self, labels: Iterable[Hashable]) -> int:
        """
        Insert each label; returns how many were new.
        """
        return sum(1 for label in labels if self.graph.insert_vertex(label))

    def add_arcs(self, arcs: Iterable[ArcSpec]) -> int:
        """
        Insert arcs given as Arc records or (source, target[, weight])
        tuples; returns how many had both endpoints present.
        """
        applied = 0
        for spec in arcs:
            source, target, weight = self._unpack(spec)
            if self.graph.insert_arc(source, target, weight):
                applied += 1
        return applied

    # ------------------------------------------------------------------
    # Literal matrices
    # ------------------------------------------------------------------

    @classmethod
    def from_weight_matrix(
        cls,
        matrix: MatrixLike,
        *,
        kind: Any = None,
        labels: Optional[Sequence[Hashable]] = None,
        config: Optional[MatrixGraphConfig] = None,
    ) -> MatrixGraph:
        """
        Build a graph from a square weight matrix.

        Every positive entry (i, j) becomes an arc from vertex i to
        vertex j, inserted in row-major order. For network kinds the
        entry is the arc weight; for graph kinds it only marks presence.
        A DataFrame supplies its index as labels; otherwise labels default
        to V1..Vn.
        """
        config = config or MatrixGraphConfig()
        logger = logging.getLogger("matrixgraph.builder")
        t0 = time.perf_counter()

        if isinstance(matrix, pd.DataFrame):
            if labels is None:
                labels = list(matrix.index)
            values = matrix.to_numpy(dtype=float)
        else:
            values = np.asarray(matrix, dtype=float)

        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f"weight matrix must be square, got shape {values.shape}")

        n = values.shape[0]
        if labels is None:
            labels = cls.default_labels(n, config)
        labels = list(labels)
        if len(labels) != n:
            raise ValueError(f"expected {n} labels, got {len(labels)}")
        if len(set(labels)) != n:
            raise ValueError("vertex labels must be unique")

        graph = MatrixGraph(config.graph.default_kind if kind is None else kind)
        builder = cls(graph, config)
        builder.add_vertices(labels)
        builder.add_arcs(
            (labels[i], labels[j], values[i, j].item())
            for i, j in zip(*np.nonzero(values > 0))
        )

        logger.info(
            "built %s graph: vertices=%s edges=%s in %.3fs",
            graph.kind.short_name,
            graph.vertex_count(),
            graph.edge_count(),
            time.perf_counter() - t0,
        )
        return graph

    @staticmethod
    def default_labels(n: int, config: Optional[MatrixGraphConfig] = None) -> List[str]:
        settings = (config or MatrixGraphConfig()).graph
        return [f"{settings.label_prefix}{settings.label_start + i}" for i in range(n)]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _unpack(self, spec: ArcSpec) -> Tuple[Hashable, Hashable, float]:
        if isinstance(spec, Arc):
            return spec.source, spec.target, spec.weight
        if len(spec) == 2:
            source, target = spec
            return source, target, self.config.graph.default_weight
        source, target, weight = spec
        return source, target, weight


def create_graph(kind: Any) -> MatrixGraph:
    """
    Construct an empty graph of the given kind.

    Raises GraphKindError for anything outside the four supported kinds.
    """
    return MatrixGraph(GraphKind.coerce(kind))
