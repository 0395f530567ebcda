"""
Structural features and shape predicates of one connected component.

A ComponentFeatures wraps an immutable directed multigraph together with the
undirected simple graph over the same vertex set.  Every iteration goes
through a fixed vertex order (lexicographic by default) so that tie-breaks
are reproducible, and every shape predicate is memoised on first use.
"""
from __future__ import annotations

import functools
from collections import deque
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set

import networkx as nx

from lodshapes.dataset.catalog import ClassCatalog
from lodshapes.features.degree import (
    Degree,
    average,
    degree_distribution,
    maximum,
    minimum,
    top_degrees,
)
from lodshapes.features.oracles import DEFAULT_BACKEND
from lodshapes.features.pruning import finite_diameter, is_caterpillar_shape, is_path, prune_leaves
from lodshapes.utils.ordering import VertexOrder, lexicographic_order, rank_map


def _memoized(method: Callable[["ComponentFeatures"], bool]) -> Callable[["ComponentFeatures"], bool]:
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self: "ComponentFeatures") -> bool:
        cache = self._predicates
        if name not in cache:
            cache[name] = method(self)
        return cache[name]

    return wrapper


def simple_projection(graph: nx.MultiDiGraph) -> nx.Graph:
    """Undirected simple graph over the same vertices, self loops dropped."""
    simple = nx.Graph()
    simple.add_nodes_from(graph.nodes())
    simple.add_edges_from((u, v) for u, v in graph.edges() if u != v)
    return simple


class ComponentFeatures:
    def __init__(
        self,
        graph: nx.DiGraph,
        simple_graph: Optional[nx.Graph] = None,
        *,
        catalog: Optional[ClassCatalog] = None,
        name: str = "",
        vertex_order: VertexOrder = lexicographic_order,
        backend=None,
    ) -> None:
        if not graph.is_directed():
            raise TypeError("ComponentFeatures needs a directed graph; got an undirected one.")
        if simple_graph is None:
            simple_graph = simple_projection(graph)
        elif simple_graph.is_directed() or simple_graph.is_multigraph():
            raise TypeError("simple_graph must be an undirected simple nx.Graph.")

        self.name = name
        self.graph = graph
        self.simple_graph = simple_graph
        self.catalog = catalog if catalog is not None else ClassCatalog.empty()
        self.vertex_order = vertex_order
        self.backend = backend if backend is not None else DEFAULT_BACKEND

        self.vertices: tuple = tuple(vertex_order(graph.nodes()))
        self._rank = rank_map(list(self.vertices))
        self._predicates: Dict[str, bool] = {}
        self._indegrees: Optional[List[Degree]] = None
        self._outdegrees: Optional[List[Degree]] = None

    def __repr__(self) -> str:
        return f"ComponentFeatures({self.name!r}, |V|={self.vertex_count}, |E|={self.edge_count})"

    # ------------------------------------------------------------------
    # Sizes
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    @property
    def edges(self) -> list:
        """Directed edges as (source, target) pairs in vertex order."""
        return [
            (u, v)
            for u in self.vertices
            for v in sorted(self.graph.successors(u), key=self._rank.__getitem__)
            for _ in range(self.graph.number_of_edges(u, v))
        ]

    def _ranked(self, vertices: Iterable[Hashable]) -> list:
        return sorted(vertices, key=self._rank.__getitem__)

    def _ordered_sets(self, sets: List[Set[Hashable]]) -> List[Set[Hashable]]:
        return sorted(sets, key=lambda s: min(self._rank[v] for v in s))

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    def is_connected(self) -> bool:
        return self.backend.is_connected(self.graph)

    def connected_sets(self) -> List[Set[Hashable]]:
        return self._ordered_sets(self.backend.connected_sets(self.graph))

    def strongly_connected_sets(self) -> List[Set[Hashable]]:
        return self._ordered_sets(self.backend.strongly_connected_sets(self.graph))

    def biconnected_sets(self) -> Optional[List[Set[Hashable]]]:
        """Biconnected vertex sets of the simple graph, None if disconnected."""
        if not self.is_connected():
            return None
        return self._ordered_sets(self.backend.biconnected_sets(self.simple_graph))

    def contains_cycles(self) -> bool:
        """Directed cycle detection on the multigraph."""
        return self.backend.has_directed_cycle(self.graph)

    def create_subgraph_features(self, partition: Iterable[Iterable[Hashable]]) -> List["ComponentFeatures"]:
        """
        Build one ComponentFeatures per part of *partition*.

        Each part gets the induced directed subgraph and the induced simple
        subgraph.  The result is sorted ascending by vertex count (stable, so
        equal sizes keep partition order).
        """
        subgraphs = []
        for i, part in enumerate(partition):
            part = set(part)
            subgraphs.append(
                ComponentFeatures(
                    self.graph.subgraph(part).copy(),
                    self.simple_graph.subgraph(part).copy(),
                    catalog=self.catalog,
                    name=f"subgraph{i}",
                    vertex_order=self.vertex_order,
                    backend=self.backend,
                )
            )
        subgraphs.sort(key=lambda f: f.vertex_count)
        return subgraphs

    def components(self) -> List["ComponentFeatures"]:
        """The connected components, or [self] when already connected."""
        if self.is_connected():
            return [self]
        return self.create_subgraph_features(self.connected_sets())

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------

    def diameter(self) -> int:
        """Longest finite directed shortest path; 0 for a single vertex."""
        return finite_diameter(self.graph, self.backend)

    def diameter_undirected(self) -> int:
        return finite_diameter(self.simple_graph, self.backend)

    def diameter_path(self) -> Optional[list]:
        """
        Vertex sequence of a longest directed shortest path.

        Sources and targets are scanned in vertex order and only a strictly
        longer path replaces the current one, so the first longest pair wins.
        Returns None when the component is disconnected.
        """
        if not self.is_connected():
            return None
        longest: Optional[list] = None
        for v in self.vertices:
            paths = self.backend.paths_from(self.graph, v, self.vertices)
            for u in self.vertices:
                if u == v or u not in paths:
                    continue
                path = paths[u]
                if longest is None or len(path) > len(longest):
                    longest = list(path)
        return longest

    # ------------------------------------------------------------------
    # Degrees
    # ------------------------------------------------------------------

    def indegree_records(self) -> List[Degree]:
        if self._indegrees is None:
            self._indegrees = [Degree(self.graph.in_degree(v), v) for v in self.vertices]
        return self._indegrees

    def outdegree_records(self) -> List[Degree]:
        if self._outdegrees is None:
            self._outdegrees = [Degree(self.graph.out_degree(v), v) for v in self.vertices]
        return self._outdegrees

    def indegrees(self) -> List[int]:
        return [d.degree for d in self.indegree_records()]

    def outdegrees(self) -> List[int]:
        return [d.degree for d in self.outdegree_records()]

    def edge_counts(self) -> List[int]:
        """Number of incident directed edges (in + out) per vertex."""
        return [self.graph.degree(v) for v in self.vertices]

    def average_indegree(self) -> float:
        return average(self.indegrees())

    def min_indegree(self) -> Optional[int]:
        return minimum(self.indegrees())

    def max_indegree(self) -> Optional[int]:
        return maximum(self.indegrees())

    def average_outdegree(self) -> float:
        return average(self.outdegrees())

    def min_outdegree(self) -> Optional[int]:
        return minimum(self.outdegrees())

    def max_outdegree(self) -> Optional[int]:
        return maximum(self.outdegrees())

    def max_in_degrees(self, k: int) -> List[Degree]:
        return top_degrees(self.indegree_records(), k)

    def max_out_degrees(self, k: int) -> List[Degree]:
        return top_degrees(self.outdegree_records(), k)

    def degree_distribution(self) -> Dict[int, int]:
        return degree_distribution(self.edge_counts())

    # ------------------------------------------------------------------
    # Colouring
    # ------------------------------------------------------------------

    def _coloring_order(self) -> list:
        # breadth-first from each unseen vertex in vertex order
        seen: set = set()
        out = []
        for start in self.vertices:
            if start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            while queue:
                v = queue.popleft()
                out.append(v)
                for u in self._ranked(self.simple_graph.neighbors(v)):
                    if u not in seen:
                        seen.add(u)
                        queue.append(u)
        return out

    def chromatic_number(self) -> int:
        """
        Greedy colouring of the simple graph.

        This is an upper bound, not the exact chromatic number.  Colouring in
        breadth-first order keeps bipartite graphs at 2 colours.
        """
        colors = self.backend.color(self.simple_graph, self._coloring_order())
        if not colors:
            return 0
        return max(colors.values()) + 1

    # ------------------------------------------------------------------
    # Shape predicates
    # ------------------------------------------------------------------

    @_memoized
    def is_path_graph(self) -> bool:
        """|V| == undirected diameter + 1 (degree sequence not verified)."""
        return is_path(self.simple_graph, self.backend)

    @_memoized
    def is_directed_path_graph(self) -> bool:
        # a path walked in both directions counts as not directed
        if not self.is_path_graph():
            return False
        return all(self.graph.in_degree(v) <= 1 for v in self.vertices)

    @_memoized
    def is_outbound_star_graph(self) -> bool:
        m = self.edge_count
        return any(
            self.graph.out_degree(v) == m
            for v in self.vertices
        )

    @_memoized
    def is_inbound_star_graph(self) -> bool:
        m = self.edge_count
        return any(
            self.graph.in_degree(v) == m
            for v in self.vertices
        )

    @_memoized
    def is_mixed_directed_star_graph(self) -> bool:
        m = self.edge_count
        return any(self.simple_graph.degree(v) == m for v in self.vertices)

    @_memoized
    def is_complete_graph(self) -> bool:
        return self.backend.is_complete(self.simple_graph)

    @_memoized
    def is_bipartite(self) -> bool:
        return self.backend.is_bipartite(self.simple_graph)

    @_memoized
    def is_tree(self) -> bool:
        return self.backend.is_tree(self.simple_graph)

    @_memoized
    def is_caterpillar(self) -> bool:
        """
        Single-level leaf pruning: drop the DFS leaves and test for a path.

        A heuristic, not a full caterpillar characterisation: the DFS start
        vertex is never pruned.
        """
        if not self.is_tree() or self.is_path_graph():
            return False
        return is_caterpillar_shape(self.simple_graph, self.vertices, self.backend)

    @_memoized
    def is_lobster(self) -> bool:
        """Prune one level of DFS leaves, then run the caterpillar pruning on the rest."""
        if not self.is_tree() or self.is_path_graph():
            return False
        pruned = prune_leaves(self.simple_graph, self.vertices)
        return is_caterpillar_shape(pruned, self.vertices, self.backend)

    # ------------------------------------------------------------------
    # Class-labelled comparison
    # ------------------------------------------------------------------

    def check_color_isomorphism(self, other: "ComponentFeatures") -> bool:
        """
        Compare class-labelled neighbourhoods with another component.

        Known defect: the equivalence flag is never set and target classes
        are looked up for the source vertex, so this returns False whenever
        this component has at least one vertex.
        """
        for vertex in self.vertices:
            class_uri = self.catalog.class_of(vertex)
            linked = self.catalog.classes_of(self._ranked(self.simple_graph.neighbors(vertex)))
            found_equivalent = False
            for target_vertex in other.vertices:
                target_class = self.catalog.class_of(vertex)
                if class_uri != target_class:
                    continue
                target_linked = other.catalog.classes_of(
                    other._ranked(other.simple_graph.neighbors(target_vertex))
                )
                if linked != target_linked:
                    return False
            if not found_equivalent:
                return False
        return True
