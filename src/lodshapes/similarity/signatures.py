from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Hashable, Iterable, Tuple

import networkx as nx

from lodshapes.dataset.catalog import ClassCatalog


@dataclass(frozen=True, order=True)
class EdgeSignature:
    """(source class, target class) of a directed edge. Order matters."""

    source_class: str
    target_class: str

    def __str__(self) -> str:
        return f"({self.source_class}, {self.target_class})"


def edge_signature(u: Hashable, v: Hashable, catalog: ClassCatalog) -> EdgeSignature:
    return EdgeSignature(catalog.class_of(u), catalog.class_of(v))


def signatures_of(edges: Iterable[Tuple[Hashable, Hashable]], catalog: ClassCatalog) -> Counter:
    counts: Counter = Counter()
    for u, v in edges:
        counts[edge_signature(u, v, catalog)] += 1
    return counts


def signature_histogram(graph: nx.Graph, catalog: ClassCatalog) -> Counter:
    """
    Count the EdgeSignatures of every directed edge of *graph*.

    Parallel edges of a multigraph are counted once each.
    """
    if not graph.is_directed():
        raise TypeError("signature histograms are taken over directed edges.")
    return signatures_of(graph.edges(), catalog)
