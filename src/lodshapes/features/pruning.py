"""
Single-level leaf pruning used by the caterpillar and lobster checks.

All functions here are pure: they return new graphs instead of recording
deletions on the caller.
"""
from __future__ import annotations

from typing import Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from lodshapes.features.oracles import DEFAULT_BACKEND, ShortestPathOracle
from lodshapes.utils.ordering import rank_map

Edge = Tuple[Hashable, Hashable]


def dfs_leaves(graph: nx.Graph, order: Sequence[Hashable]) -> List[Tuple[Hashable, Edge]]:
    """Run one depth-first traversal and collect its leaves.

    Parts are entered at their first vertex in *order*; neighbours are
    expanded by rank in *order*.  A vertex is a DFS leaf when it finishes
    without discovering any new vertex.  Each leaf is returned with the edge
    it was discovered through.  Start vertices have no such edge and are
    never returned, even when they have degree 1.
    """
    rank = rank_map(list(order))
    last = len(rank)

    def ranked(v: Hashable) -> list:
        return sorted(graph[v], key=lambda u: rank.get(u, last))

    visited: set = set()
    leaves: List[Tuple[Hashable, Edge]] = []
    for start in order:
        if start in visited or start not in graph:
            continue
        visited.add(start)
        discovered_child = {start: False}
        stack: list = [(start, None, iter(ranked(start)))]
        while stack:
            node, via, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    discovered_child[node] = True
                    discovered_child[child] = False
                    stack.append((child, (node, child), iter(ranked(child))))
                    break
            else:
                stack.pop()
                if via is not None and not discovered_child[node]:
                    leaves.append((node, via))
    return leaves


def prune_leaves(graph: nx.Graph, order: Sequence[Hashable]) -> nx.Graph:
    """Return a copy of *graph* without its DFS leaves and their edges."""
    marked = dfs_leaves(graph, order)
    doomed_vertices = {v for v, _ in marked}
    doomed_edges = {frozenset(e) for _, e in marked}

    pruned = nx.Graph()
    pruned.add_nodes_from(v for v in graph.nodes() if v not in doomed_vertices)
    pruned.add_edges_from(
        (u, v)
        for u, v in graph.edges()
        if frozenset((u, v)) not in doomed_edges
        and u not in doomed_vertices
        and v not in doomed_vertices
    )
    return pruned


def finite_diameter(
    graph: nx.Graph,
    paths: Optional[ShortestPathOracle] = None,
) -> int:
    """Largest finite shortest-path length between any two vertices.

    Unreachable pairs are ignored, so a disconnected graph reports the
    diameter of its widest part.  Fewer than two vertices -> 0.
    """
    paths = paths or DEFAULT_BACKEND
    best = 0
    for v in graph.nodes():
        lengths = paths.lengths_from(graph, v)
        if lengths:
            best = max(best, max(lengths.values()))
    return best


def is_path(graph: nx.Graph, paths: Optional[ShortestPathOracle] = None) -> bool:
    """Path test by diameter: |V| == diameter + 1.

    Known limitation: the degree sequence is not checked independently.
    """
    if graph.number_of_nodes() == 0:
        return False
    return graph.number_of_nodes() == finite_diameter(graph, paths) + 1


def is_caterpillar_shape(
    graph: nx.Graph,
    order: Sequence[Hashable],
    paths: Optional[ShortestPathOracle] = None,
) -> bool:
    """True iff pruning one level of DFS leaves leaves a path."""
    return is_path(prune_leaves(graph, order), paths)
