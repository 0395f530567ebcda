from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import networkx as nx


@dataclass(frozen=True)
class CanonicalForm:
    """
    Compact, identifier-free stand-in for a component's shape.

    classes: classes[i] is the class tag of synthetic vertex i
    edges:   (parent_id, child_id) pairs in discovery order
    directed: True when built by a directed traversal
    """

    classes: Tuple[str, ...]
    edges: Tuple[Tuple[int, int], ...]
    directed: bool = False

    @property
    def vertex_count(self) -> int:
        return len(self.classes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def key(self) -> tuple:
        return (self.directed, self.classes, self.edges)

    def nodes(self) -> List[Tuple[int, str]]:
        return list(enumerate(self.classes))

    def triples(self) -> List[Tuple[int, int, Tuple[str, str]]]:
        """(source id, target id, (source class, target class)) per edge."""
        return [(u, v, (self.classes[u], self.classes[v])) for u, v in self.edges]

    def to_networkx(self) -> nx.Graph:
        G = nx.DiGraph() if self.directed else nx.Graph()
        for i, clazz in enumerate(self.classes):
            G.add_node(i, group=clazz)
        G.add_edges_from(self.edges)
        return G
