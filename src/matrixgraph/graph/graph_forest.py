from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterator, List, Optional


@dataclass
class ForestNode:
    """
    Child-sibling tree node.

    Links are indices into the owning SpanningForest's node arena.
    """

    vertex: Hashable
    first_child: Optional[int] = None
    next_sibling: Optional[int] = None


@dataclass
class SpanningForest:
    """
    Depth-first spanning forest, one tree per connected component.

    Nodes live in a single arena; ``roots`` holds the arena index of each
    tree root in discovery order.
    """

    nodes: List[ForestNode] = field(default_factory=list)
    roots: List[int] = field(default_factory=list)

    def add_node(self, vertex: Hashable) -> int:
        self.nodes.append(ForestNode(vertex=vertex))
        return len(self.nodes) - 1

    def children(self, index: int) -> Iterator[int]:
        child = self.nodes[index].first_child
        while child is not None:
            yield child
            child = self.nodes[child].next_sibling

    def preorder(self, root: int) -> Iterator[Hashable]:
        """
        Yield vertices of the tree at ``root`` in discovery order.
        """
        stack = [root]
        while stack:
            index = stack.pop()
            yield self.nodes[index].vertex
            stack.extend(reversed(list(self.children(index))))

    def tree_size(self, root: int) -> int:
        return sum(1 for _ in self.preorder(root))

    def tree_count(self) -> int:
        return len(self.roots)

    def __len__(self) -> int:
        return len(self.nodes)
