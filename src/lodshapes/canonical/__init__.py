from .form import CanonicalForm
from .patterns import PatternGroups, group_by_canonical_form
from .traversal import CanonicalFormBuilder, MinimizingTraversal, TraversalKind, incident_edges

__all__ = [
    "CanonicalForm",
    "CanonicalFormBuilder",
    "MinimizingTraversal",
    "TraversalKind",
    "incident_edges",
    "PatternGroups",
    "group_by_canonical_form",
]
