"""
Pluggable graph-algorithm backends.

ComponentFeatures only talks to these four protocols, so any general graph
library (or hand written algorithm) can stand in for the default
NetworkXBackend.

Degrees follow networkx, so a self loop adds two to its vertex.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, List, Protocol, Sequence, Set

import networkx as nx

from lodshapes.utils.ordering import rank_map


class ConnectivityOracle(Protocol):
    def is_connected(self, graph: nx.Graph) -> bool: ...

    def connected_sets(self, graph: nx.Graph) -> List[Set[Hashable]]: ...

    def strongly_connected_sets(self, graph: nx.DiGraph) -> List[Set[Hashable]]: ...

    def biconnected_sets(self, graph: nx.Graph) -> List[Set[Hashable]]: ...


class ShortestPathOracle(Protocol):
    def lengths_from(self, graph: nx.Graph, source: Hashable) -> Dict[Hashable, int]: ...

    def paths_from(
        self, graph: nx.Graph, source: Hashable, order: Sequence[Hashable]
    ) -> Dict[Hashable, List[Hashable]]: ...


class ChromaticHeuristic(Protocol):
    def color(self, graph: nx.Graph, order: Sequence[Hashable]) -> Dict[Hashable, int]: ...


class CycleDetector(Protocol):
    def has_directed_cycle(self, graph: nx.DiGraph) -> bool: ...

    def is_tree(self, graph: nx.Graph) -> bool: ...

    def is_bipartite(self, graph: nx.Graph) -> bool: ...

    def is_complete(self, graph: nx.Graph) -> bool: ...


class NetworkXBackend:
    """Default backend: every oracle answered with networkx."""

    def is_connected(self, graph: nx.Graph) -> bool:
        # no vertices or one vertex -> True
        if graph.number_of_nodes() <= 1:
            return True
        if graph.is_directed():
            return nx.is_weakly_connected(graph)
        return nx.is_connected(graph)

    def connected_sets(self, graph: nx.Graph) -> List[Set[Hashable]]:
        if graph.is_directed():
            return [set(c) for c in nx.weakly_connected_components(graph)]
        return [set(c) for c in nx.connected_components(graph)]

    def strongly_connected_sets(self, graph: nx.DiGraph) -> List[Set[Hashable]]:
        return [set(c) for c in nx.strongly_connected_components(graph)]

    def biconnected_sets(self, graph: nx.Graph) -> List[Set[Hashable]]:
        return [set(c) for c in nx.biconnected_components(graph)]

    def lengths_from(self, graph: nx.Graph, source: Hashable) -> Dict[Hashable, int]:
        return dict(nx.single_source_shortest_path_length(graph, source))

    def paths_from(
        self, graph: nx.Graph, source: Hashable, order: Sequence[Hashable]
    ) -> Dict[Hashable, List[Hashable]]:
        """Breadth-first shortest paths from *source*.

        Successors are expanded by rank in *order*, so among equally short
        paths the one through lower-ranked vertices wins regardless of the
        order edges were added to *graph*.
        """
        rank = rank_map(list(order))
        last = len(rank)
        paths = {source: [source]}
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for u in sorted(graph[v], key=lambda w: rank.get(w, last)):
                if u not in paths:
                    paths[u] = paths[v] + [u]
                    queue.append(u)
        return paths

    def color(self, graph: nx.Graph, order: Sequence[Hashable]) -> Dict[Hashable, int]:
        return nx.greedy_color(graph, strategy=lambda G, colors: iter(order))

    def has_directed_cycle(self, graph: nx.DiGraph) -> bool:
        return not nx.is_directed_acyclic_graph(graph)

    def is_tree(self, graph: nx.Graph) -> bool:
        if graph.number_of_nodes() == 0:
            return False
        return nx.is_tree(graph)

    def is_bipartite(self, graph: nx.Graph) -> bool:
        return nx.is_bipartite(graph)

    def is_complete(self, graph: nx.Graph) -> bool:
        n = graph.number_of_nodes()
        loops = nx.number_of_selfloops(graph)
        return graph.number_of_edges() - loops == n * (n - 1) // 2


DEFAULT_BACKEND = NetworkXBackend()
