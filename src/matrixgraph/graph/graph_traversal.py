from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Dict, Hashable, Iterator, Optional, Tuple

import numpy as np

from matrixgraph.graph.graph_forest import SpanningForest
from matrixgraph.graph.graph_query import GraphQueryEngine
from matrixgraph.graph.graph_store import MatrixGraph

logger = logging.getLogger("matrixgraph.traversal")

Visitor = Callable[[Hashable], Any]

# Marks a DFS frame that has not scanned any neighbor yet.
_UNSCANNED = object()


class GraphTraversal:
    """
    Depth-first, breadth-first and spanning-forest traversals.

    All traversals seed from vertices in store order and expand neighbors
    in ascending index order, so disconnected components are covered and
    output is deterministic. Visited state lives only for the duration of
    one call.

    The visitor runs inline and must not mutate the graph.
    """

    def __init__(self, graph: MatrixGraph) -> None:
        self.graph = graph
        self.query = GraphQueryEngine(graph)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def depth_first(self, visitor: Visitor) -> None:
        visited = self._fresh_state()
        visits = 0

        for seed in self.graph.vertices():
            if visited[self.query.locate_vertex(seed)]:
                continue
            for vertex, _ in self._discover(seed, visited):
                visitor(vertex)
                visits += 1

        logger.debug("depth_first visited %d vertices", visits)

    def breadth_first(self, visitor: Visitor) -> None:
        visited = self._fresh_state()
        visits = 0

        for seed in self.graph.vertices():
            seed_index = self.query.locate_vertex(seed)
            if visited[seed_index]:
                continue

            visited[seed_index] = True
            visitor(seed)
            visits += 1
            queue = deque([seed])

            while queue:
                u = queue.popleft()
                for w in self.query.neighbors(u):
                    w_index = self.query.locate_vertex(w)
                    if visited[w_index]:
                        continue
                    visited[w_index] = True
                    visitor(w)
                    visits += 1
                    queue.append(w)

        logger.debug("breadth_first visited %d vertices", visits)

    def depth_first_forest(self) -> SpanningForest:
        """
        Build the depth-first spanning forest as child-sibling trees.

        A node's first discovered neighbor becomes its first child; each
        later child discovered from the same parent is linked as the
        next sibling of the previous one.
        """
        forest = SpanningForest()
        visited = self._fresh_state()

        for seed in self.graph.vertices():
            if visited[self.query.locate_vertex(seed)]:
                continue

            node_of: Dict[Hashable, int] = {}
            last_child: Dict[int, int] = {}

            for vertex, parent in self._discover(seed, visited):
                node = forest.add_node(vertex)
                is_root = not node_of
                node_of[vertex] = node

                if is_root:
                    forest.roots.append(node)
                    continue

                parent_node = node_of[parent]
                previous = last_child.get(parent_node)
                if previous is None:
                    forest.nodes[parent_node].first_child = node
                else:
                    forest.nodes[previous].next_sibling = node
                last_child[parent_node] = node

        logger.debug(
            "depth_first_forest built %d trees over %d vertices",
            forest.tree_count(),
            len(forest),
        )
        return forest

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fresh_state(self) -> np.ndarray:
        return np.zeros(self.graph.vertex_count(), dtype=bool)

    def _discover(
        self,
        seed: Hashable,
        visited: np.ndarray,
    ) -> Iterator[Tuple[Hashable, Optional[Hashable]]]:
        """
        Yield ``(vertex, parent)`` pairs of one component in depth-first
        discovery order. The seed is yielded with parent None.

        Each stack frame remembers the last neighbor it scanned so the
        scan resumes with next_adjacent, exactly as the recursive
        formulation would after returning from a child.
        """
        visited[self.query.locate_vertex(seed)] = True
        yield seed, None

        stack = [(seed, _UNSCANNED)]
        while stack:
            v, after = stack[-1]
            if after is _UNSCANNED:
                w, found = self.query.first_adjacent(v)
            else:
                w, found = self.query.next_adjacent(v, after)

            if not found:
                stack.pop()
                continue

            stack[-1] = (v, w)
            w_index = self.query.locate_vertex(w)
            if visited[w_index]:
                continue

            visited[w_index] = True
            yield w, v
            stack.append((w, _UNSCANNED))


# ---------------------------------------------------------------------
# Functional entry points
# ---------------------------------------------------------------------


def depth_first_traverse(graph: MatrixGraph, visitor: Visitor) -> None:
    GraphTraversal(graph).depth_first(visitor)


def breadth_first_traverse(graph: MatrixGraph, visitor: Visitor) -> None:
    GraphTraversal(graph).breadth_first(visitor)


def build_depth_first_forest(graph: MatrixGraph) -> SpanningForest:
    return GraphTraversal(graph).depth_first_forest()
