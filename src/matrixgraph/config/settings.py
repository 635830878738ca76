from __future__ import annotations

from dataclasses import dataclass

from matrixgraph.graph.graph_schema import GraphKind

# ---------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphSettings:
    """
    Defaults applied when graphs are built from literal data.
    """

    default_kind: GraphKind = GraphKind.UNDIRECTED_GRAPH
    default_weight: float = 0.0
    label_prefix: str = "V"
    label_start: int = 1


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class MatrixGraphConfig:
    """
    Root configuration object for matrixgraph.

    Constructed explicitly and passed to the components that need it;
    nothing reads it from global state.
    """

    graph: GraphSettings = GraphSettings()
