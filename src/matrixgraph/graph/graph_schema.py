from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable

# Returned by locate_vertex when a label is not in the vertex store.
NOT_FOUND = -1


class GraphKindError(ValueError):
    """
    Raised when a graph is constructed with an unsupported kind.

    This is the only error the graph core raises. Missing vertices,
    missing arcs and duplicate insertions are reported through return
    values instead.
    """

    def __init__(self, kind: Any) -> None:
        super().__init__(f"unsupported graph kind: {kind!r}")
        self.kind = kind


class GraphKind(str, Enum):
    """
    Immutable kind tag fixed at construction.

    Selects directed-vs-undirected mirroring and graph-vs-network
    weight semantics.
    """

    DIRECTED_GRAPH = "directed-graph"
    DIRECTED_NETWORK = "directed-network"
    UNDIRECTED_GRAPH = "undirected-graph"
    UNDIRECTED_NETWORK = "undirected-network"

    @property
    def is_directed(self) -> bool:
        return self in (GraphKind.DIRECTED_GRAPH, GraphKind.DIRECTED_NETWORK)

    @property
    def is_network(self) -> bool:
        return self in (GraphKind.DIRECTED_NETWORK, GraphKind.UNDIRECTED_NETWORK)

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @staticmethod
    def coerce(value: Any) -> "GraphKind":
        """
        Resolve a member, its value ("undirected-network") or its short
        name ("UDN") to a GraphKind.
        """
        if isinstance(value, GraphKind):
            return value
        if isinstance(value, str):
            key = value.strip()
            for kind in GraphKind:
                if key == kind.value or key.upper() == _SHORT_NAMES[kind]:
                    return kind
        raise GraphKindError(value)


_SHORT_NAMES = {
    GraphKind.DIRECTED_GRAPH: "DG",
    GraphKind.DIRECTED_NETWORK: "DN",
    GraphKind.UNDIRECTED_GRAPH: "UDG",
    GraphKind.UNDIRECTED_NETWORK: "UDN",
}


@dataclass(frozen=True)
class Arc:
    """
    Connection between two vertices as seen by callers.

    Arcs are materialized from the matrix on request; the matrix itself
    only stores occupancy and weight, so an Arc never goes stale when
    vertex indices shift.
    """

    source: Hashable
    target: Hashable
    weight: float = 0
