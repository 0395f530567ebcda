"""
First-fit grouping of components by their set of edge signatures.

Two components land in the same bag when the founder of that bag and the
newcomer use exactly the same set of (source class, target class) edge
types.  Counts are ignored for membership; differences are kept as deltas.
This is an approximation of shape equality, and the result depends on the
order in which components are added.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from lodshapes.canonical.form import CanonicalForm
from lodshapes.dataset.catalog import ClassCatalog
from lodshapes.features.component import ComponentFeatures
from lodshapes.similarity.signatures import EdgeSignature, signatures_of
from lodshapes.utils.limits import size_skip_reason
from lodshapes.utils.ordering import VertexOrder, rank_map

logger = logging.getLogger(__name__)


@dataclass
class SimilarityBag:
    """
    members:    components in the order they were added; members[0] founded the bag
    signatures: edge-signature histogram of the founder
    deltas:     signature -> abs(count difference) against the founder,
                written by every later member that disagrees (last one wins)
    """

    members: List[ComponentFeatures]
    signatures: Counter
    deltas: Dict[EdgeSignature, int] = field(default_factory=dict)

    @property
    def founder(self) -> ComponentFeatures:
        return self.members[0]

    @property
    def signature_keys(self) -> FrozenSet[EdgeSignature]:
        return frozenset(self.signatures)

    def __len__(self) -> int:
        return len(self.members)


def signature_path(
    component: ComponentFeatures,
    catalog: ClassCatalog,
    *,
    vertex_order: Optional[VertexOrder] = None,
) -> CanonicalForm:
    """
    Abstract path rendering of *component*.

    Each distinct edge signature, in order of first appearance, becomes one
    edge between two fresh synthetic vertices tagged with its source and
    target class.
    """
    if vertex_order is None:
        edges = component.edges
    else:
        rank = rank_map(list(vertex_order(component.graph.nodes())))
        edges = sorted(component.graph.edges(), key=lambda e: (rank[e[0]], rank[e[1]]))

    classes: List[str] = []
    form_edges: List[Tuple[int, int]] = []
    for sig in signatures_of(edges, catalog):
        n = len(classes)
        classes.extend((sig.source_class, sig.target_class))
        form_edges.append((n, n + 1))
    return CanonicalForm(tuple(classes), tuple(form_edges), directed=True)


class SimilarityGrouper:
    """Buckets components into SimilarityBags, first fit in insertion order."""

    def __init__(
        self,
        catalog: ClassCatalog,
        *,
        max_vertices: int = 200,
        vertex_order: Optional[VertexOrder] = None,
    ) -> None:
        if max_vertices < 1:
            raise ValueError("max_vertices must be positive.")
        self.catalog = catalog
        self.max_vertices = max_vertices
        self.vertex_order = vertex_order
        self.bags: List[SimilarityBag] = []
        self.skipped: List[Tuple[ComponentFeatures, str]] = []
        self.deltas: Dict[Tuple[int, EdgeSignature], int] = {}

    def add(self, component: ComponentFeatures) -> Optional[int]:
        """Place *component* in a bag and return its index, or None if skipped."""
        reason = size_skip_reason(component.vertex_count, self.max_vertices)
        if reason is not None:
            logger.debug("%s %s (%d vertices)", component.name, reason, component.vertex_count)
            self.skipped.append((component, reason))
            return None

        histogram = signatures_of(component.edges, self.catalog)
        keys = frozenset(histogram)
        for index, bag in enumerate(self.bags):
            if keys != bag.signature_keys:
                continue
            bag.members.append(component)
            for sig, count in histogram.items():
                diff = abs(count - bag.signatures[sig])
                if diff:
                    bag.deltas[sig] = diff
                    self.deltas[(index, sig)] = diff
            return index

        self.bags.append(SimilarityBag([component], histogram))
        logger.debug("bag %d founded by %s with %d signatures", len(self.bags) - 1, component.name, len(keys))
        return len(self.bags) - 1

    def group(self, components: Iterable[ComponentFeatures]) -> List[SimilarityBag]:
        for component in components:
            self.add(component)
        return self.bags

    def path(self, bag_index: int) -> CanonicalForm:
        return signature_path(self.bags[bag_index].founder, self.catalog, vertex_order=self.vertex_order)
