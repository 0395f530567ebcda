"""
Whole-graph structure analysis.

Splits a graph into its connected components, runs the shape predicates of
every component in a fixed cascade and gathers the graph-wide degree
statistics.  Expensive checks are only run below a vertex-count cap; above it
they are reported as skipped.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from lodshapes.features.component import ComponentFeatures
from lodshapes.features.degree import Degree, average
from lodshapes.utils.limits import TOO_LARGE

logger = logging.getLogger(__name__)

FAMILIES = (
    "tree",
    "caterpillar",
    "lobster",
    "complete",
    "bipartite",
    "path",
    "directed path",
    "star",
    "outbound star",
    "inbound star",
)


@dataclass
class Classification:
    families: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def recognized(self) -> bool:
        return bool(self.families)


def classify_component(component: ComponentFeatures, *, max_diameter_size: int = 50) -> Classification:
    """
    Run the shape cascade on one connected component.

    Trees are refined into caterpillars, or else lobsters.  Path and star
    checks need diameters and only run when the component has fewer than
    *max_diameter_size* vertices; otherwise they are listed in ``skipped``.
    """
    result = Classification()

    cycles = component.contains_cycles()
    logger.debug("%s contains cycles: %s", component.name, cycles)
    if not cycles and component.is_tree():
        result.families.append("tree")
        if component.is_caterpillar():
            result.families.append("caterpillar")
        elif component.is_lobster():
            result.families.append("lobster")

    if component.is_complete_graph():
        result.families.append("complete")
    if component.is_bipartite():
        result.families.append("bipartite")

    if component.vertex_count >= max_diameter_size:
        result.skipped.extend(["path", "star"])
        return result

    if component.is_path_graph():
        result.families.append("path")
        if component.is_directed_path_graph():
            result.families.append("directed path")
    elif component.is_mixed_directed_star_graph():
        result.families.append("star")
        if component.is_outbound_star_graph():
            result.families.append("outbound star")
        elif component.is_inbound_star_graph():
            result.families.append("inbound star")
    return result


def size_counts(sets: Iterable[Set[Hashable]]) -> Dict[int, int]:
    """component size -> number of components of that size, ascending."""
    counts = Counter(len(s) for s in sets)
    return {size: counts[size] for size in sorted(counts)}


@dataclass
class ComponentSummary:
    name: str
    vertex_count: int
    edge_count: int
    diameter: Any
    families: List[str]
    skipped: List[str]
    max_in_degrees: List[Degree]
    max_out_degrees: List[Degree]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "vertices": self.vertex_count,
            "edges": self.edge_count,
            "diameter": self.diameter,
            "families": list(self.families),
            "skipped": list(self.skipped),
            "highest_indegrees": _degree_pairs(self.max_in_degrees),
            "highest_outdegrees": _degree_pairs(self.max_out_degrees),
        }


def _degree_pairs(records: List[Degree]) -> List[Tuple[str, int]]:
    return [(str(d.vertex), d.degree) for d in records]


@dataclass
class StructureReport:
    vertex_count: int
    edge_count: int
    connected: bool
    connected_sizes: Dict[int, int]
    strongly_connected_sizes: Dict[int, int]
    families: Dict[str, List[ComponentFeatures]]
    unrecognized: List[ComponentFeatures]
    components: List[ComponentFeatures]
    summaries: List[ComponentSummary]
    average_indegree: float
    min_indegree: Optional[int]
    max_indegree: Optional[int]
    average_outdegree: float
    min_outdegree: Optional[int]
    max_outdegree: Optional[int]
    average_links: float
    degree_distribution: Dict[int, int]
    highest_indegrees: List[Degree]
    highest_outdegrees: List[Degree]
    chromatic_number: Any = None

    def family_counts(self) -> Dict[str, int]:
        return {name: len(members) for name, members in self.families.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": self.vertex_count,
            "edges": self.edge_count,
            "connected": self.connected,
            "connected_sizes": self.connected_sizes,
            "strongly_connected_sizes": self.strongly_connected_sizes,
            "families": self.family_counts(),
            "unrecognized": len(self.unrecognized),
            "components": [s.to_dict() for s in self.summaries],
            "average_indegree": self.average_indegree,
            "min_indegree": self.min_indegree,
            "max_indegree": self.max_indegree,
            "average_outdegree": self.average_outdegree,
            "min_outdegree": self.min_outdegree,
            "max_outdegree": self.max_outdegree,
            "average_links": self.average_links,
            "degree_distribution": self.degree_distribution,
            "highest_indegrees": _degree_pairs(self.highest_indegrees),
            "highest_outdegrees": _degree_pairs(self.highest_outdegrees),
            "chromatic_number": self.chromatic_number,
        }


def _log_sizes(sizes: Dict[int, int]) -> None:
    for size, count in sizes.items():
        logger.info("\t\t%d x %d", count, size)


def analyze_graph(
    features: ComponentFeatures,
    *,
    min_component_size: int = 1,
    max_diameter_size: int = 50,
    max_chromatic_size: int = 3000,
    top_k: int = 5,
    skip_chromatic: bool = False,
) -> StructureReport:
    """Analyse every connected component of *features* and the graph as a whole."""
    if top_k < 0:
        raise ValueError("top_k must be >= 0.")

    logger.info("Vertices: %d", features.vertex_count)
    logger.info("Edges: %d", features.edge_count)
    connected = features.is_connected()
    logger.info("Connectivity: %s", "yes" if connected else "no")

    connected_sets = features.connected_sets()
    connected_sizes = size_counts(connected_sets)
    logger.info("Connected sets: %d", len(connected_sets))
    _log_sizes(connected_sizes)

    strong_sets = features.strongly_connected_sets()
    strong_sizes = size_counts(strong_sets)
    logger.info("Strongly connected components: %d", len(strong_sets))
    _log_sizes(strong_sizes)

    components = features.components()
    families: Dict[str, List[ComponentFeatures]] = {name: [] for name in FAMILIES}
    unrecognized: List[ComponentFeatures] = []
    summaries: List[ComponentSummary] = []

    for component in components:
        if component.vertex_count < min_component_size:
            continue
        logger.info("Subgraph %s: %d vertices", component.name or "main", component.vertex_count)

        if component.vertex_count < max_diameter_size:
            diameter: Any = component.diameter()
            logger.info("\tedges: %d, diameter: %d", component.edge_count, diameter)
        else:
            diameter = TOO_LARGE
            logger.warning("\tGraph too big to show diameter")

        result = classify_component(component, max_diameter_size=max_diameter_size)
        for name in result.families:
            families[name].append(component)
        if not result.recognized:
            unrecognized.append(component)
        logger.info("\tfamilies: %s", ", ".join(result.families) or "unrecognized")

        summaries.append(
            ComponentSummary(
                name=component.name,
                vertex_count=component.vertex_count,
                edge_count=component.edge_count,
                diameter=diameter,
                families=result.families,
                skipped=result.skipped,
                max_in_degrees=component.max_in_degrees(top_k),
                max_out_degrees=component.max_out_degrees(top_k),
            )
        )

    report = StructureReport(
        vertex_count=features.vertex_count,
        edge_count=features.edge_count,
        connected=connected,
        connected_sizes=connected_sizes,
        strongly_connected_sizes=strong_sizes,
        families=families,
        unrecognized=unrecognized,
        components=components,
        summaries=summaries,
        average_indegree=features.average_indegree(),
        min_indegree=features.min_indegree(),
        max_indegree=features.max_indegree(),
        average_outdegree=features.average_outdegree(),
        min_outdegree=features.min_outdegree(),
        max_outdegree=features.max_outdegree(),
        average_links=average(features.edge_counts()),
        degree_distribution=features.degree_distribution(),
        highest_indegrees=features.max_in_degrees(top_k),
        highest_outdegrees=features.max_out_degrees(top_k),
    )
    logger.info("Vertex degrees:")
    logger.info("\tAverage indegree: %s", report.average_indegree)
    logger.info("\tMax indegree: %s", report.max_indegree)
    logger.info("\tMin indegree: %s", report.min_indegree)
    logger.info("\tAverage outdegree: %s", report.average_outdegree)
    logger.info("\tAverage links: %s", report.average_links)

    if skip_chromatic:
        return report
    if features.vertex_count > max_chromatic_size:
        report.chromatic_number = TOO_LARGE
        logger.warning("Graph too big to compute the chromatic number")
    else:
        report.chromatic_number = features.chromatic_number()
    logger.info("Chromatic number: %s", report.chromatic_number)
    return report
