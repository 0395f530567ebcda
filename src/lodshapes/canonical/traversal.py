"""
Class-aware minimizing breadth-first traversal.

At each visited vertex the incident edges are ordered by neighbour class.
A neighbour is skipped when it has the same class as the previously accepted
sibling, has degree 1 in the whole graph, and a degree-1 sibling of that
class was already accepted for this vertex.  Runs of identical leaves
therefore collapse to one representative, and the discovery edges form the
CanonicalForm.

Degrees are networkx degrees, where a self loop counts twice.  The dataset
loader drops self loops, and a looped vertex is never a leaf either way.
"""
from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Callable, Hashable, Iterator, List, Optional, Tuple

import networkx as nx

from lodshapes.canonical.form import CanonicalForm
from lodshapes.dataset.catalog import ClassCatalog
from lodshapes.utils.ordering import VertexOrder, lexicographic_order, rank_map

logger = logging.getLogger(__name__)

Edge = Tuple[Hashable, Hashable]


class TraversalKind(Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def for_graph(cls, graph: nx.Graph) -> "TraversalKind":
        return cls.DIRECTED if graph.is_directed() else cls.UNDIRECTED


def incident_edges(graph: nx.Graph, kind: TraversalKind) -> Callable[[Hashable], List[Edge]]:
    """Pick the 'edges incident to a vertex' strategy for *kind*.

    DIRECTED: outgoing edges only.  UNDIRECTED: every incident edge
    (outgoing and incoming on a directed graph).  Parallel edges of a
    multigraph appear once per edge.
    """
    if kind is TraversalKind.DIRECTED:
        if not graph.is_directed():
            raise TypeError("a directed traversal needs a directed graph.")
        return lambda v: list(graph.out_edges(v))
    if graph.is_directed():
        return lambda v: list(graph.out_edges(v)) + list(graph.in_edges(v))
    return lambda v: list(graph.edges(v))


class MinimizingTraversal:
    """
    Iterator over the vertices visited by the minimizing BFS.

    Traversal starts at *start* (default: first vertex in *vertex_order*).
    When the queue runs dry the next vertex in order that was neither
    visited nor collapsed into a sibling becomes a new root, so vertices
    unreachable from the start still end up in the form.
    """

    def __init__(
        self,
        graph: nx.Graph,
        catalog: ClassCatalog,
        *,
        vertex_order: VertexOrder = lexicographic_order,
        kind: Optional[TraversalKind] = None,
        start: Optional[Hashable] = None,
    ) -> None:
        if start is not None and start not in graph:
            raise ValueError(f"graph must contain the start vertex {start!r}.")
        self.graph = graph
        self.catalog = catalog
        self.kind = kind if kind is not None else TraversalKind.for_graph(graph)
        self._edges_of = incident_edges(graph, self.kind)

        order = list(vertex_order(graph.nodes()))
        self._rank = rank_map(order)
        self._roots = deque(([start] if start is not None else []) + order)
        self._queue: deque = deque()
        self._ids: dict = {}
        self._collapsed: set = set()
        self._classes: List[str] = []
        self._form_edges: List[Tuple[int, int]] = []

    def __iter__(self) -> Iterator[Hashable]:
        return self

    def __next__(self) -> Hashable:
        if not self._queue:
            root = self._next_root()
            if root is None:
                raise StopIteration
            self._encounter(root, None)
        vertex = self._queue.popleft()
        self._add_unseen_children(vertex)
        return vertex

    def _next_root(self) -> Optional[Hashable]:
        while self._roots:
            v = self._roots.popleft()
            if v not in self._ids and v not in self._collapsed:
                return v
        return None

    def _encounter(self, vertex: Hashable, parent: Optional[Hashable]) -> None:
        self._ids[vertex] = len(self._classes)
        self._classes.append(self.catalog.class_of(vertex))
        self._queue.append(vertex)
        if parent is not None:
            self._form_edges.append((self._ids[parent], self._ids[vertex]))

    def _sorted_neighbours(self, vertex: Hashable) -> List[Tuple[Hashable, str]]:
        neighbours = []
        for u, v in self._edges_of(vertex):
            opposite = v if u == vertex else u
            neighbours.append(opposite)
        neighbours.sort(key=self._rank.__getitem__)
        tagged = [(n, self.catalog.class_of(n)) for n in neighbours]
        tagged.sort(key=lambda t: t[1])
        return tagged

    def _add_unseen_children(self, vertex: Hashable) -> None:
        last_class: Optional[str] = None
        single_link_classes: set = set()
        for neighbour, clazz in self._sorted_neighbours(vertex):
            is_leaf = self.graph.degree(neighbour) == 1
            if clazz == last_class and is_leaf and clazz in single_link_classes:
                self._collapsed.add(neighbour)
                continue
            last_class = clazz
            if is_leaf:
                single_link_classes.add(clazz)
            if neighbour not in self._ids:
                self._encounter(neighbour, vertex)

    def form(self) -> CanonicalForm:
        """Run the traversal to the end and return the collapsed form."""
        for _ in self:
            pass
        return CanonicalForm(
            classes=tuple(self._classes),
            edges=tuple(self._form_edges),
            directed=self.kind is TraversalKind.DIRECTED,
        )


class CanonicalFormBuilder:
    """Builds CanonicalForms with a fixed catalog, vertex order and traversal kind."""

    def __init__(
        self,
        catalog: ClassCatalog,
        *,
        vertex_order: VertexOrder = lexicographic_order,
        kind: Optional[TraversalKind] = None,
    ) -> None:
        self.catalog = catalog
        self.vertex_order = vertex_order
        self.kind = kind

    def traversal(self, graph: nx.Graph) -> MinimizingTraversal:
        return MinimizingTraversal(
            graph,
            self.catalog,
            vertex_order=self.vertex_order,
            kind=self.kind,
        )

    def build(self, graph: nx.Graph) -> CanonicalForm:
        form = self.traversal(graph).form()
        logger.debug(
            "minimized %d vertices / %d edges to %d / %d",
            graph.number_of_nodes(),
            graph.number_of_edges(),
            form.vertex_count,
            form.edge_count,
        )
        return form
