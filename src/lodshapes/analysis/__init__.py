from .structures import (
    FAMILIES,
    Classification,
    ComponentSummary,
    StructureReport,
    analyze_graph,
    classify_component,
    size_counts,
)

__all__ = [
    "FAMILIES",
    "Classification",
    "ComponentSummary",
    "StructureReport",
    "analyze_graph",
    "classify_component",
    "size_counts",
]
