"""
lodshapes: structural shape analysis of class-labelled linked-data graphs.
Component features and shape predicates, class-aware minimized forms, and
edge-signature similarity grouping.
"""

from .dataset.catalog import UNKNOWN_CLASS, ClassCatalog
from .dataset.loader import Dataset, load_files, load_lines
from .features.component import ComponentFeatures
from .features.degree import Degree
from .features.oracles import DEFAULT_BACKEND, NetworkXBackend
from .canonical.form import CanonicalForm
from .canonical.traversal import CanonicalFormBuilder, MinimizingTraversal, TraversalKind
from .canonical.patterns import PatternGroups, group_by_canonical_form
from .similarity.signatures import EdgeSignature, signature_histogram
from .similarity.grouper import SimilarityBag, SimilarityGrouper, signature_path
from .analysis.structures import StructureReport, analyze_graph, classify_component
from .io.json_output import canonical_json, colored_json, dumps, plain_json, similarity_report

# Shared utilities
from .utils.ordering import lexicographic_order, rank_map
from .utils.limits import SINGLETON, TOO_LARGE

__all__ = [
    # Dataset
    "UNKNOWN_CLASS",
    "ClassCatalog",
    "Dataset",
    "load_files",
    "load_lines",
    # Features
    "ComponentFeatures",
    "Degree",
    "DEFAULT_BACKEND",
    "NetworkXBackend",
    # Canonical forms
    "CanonicalForm",
    "CanonicalFormBuilder",
    "MinimizingTraversal",
    "TraversalKind",
    "PatternGroups",
    "group_by_canonical_form",
    # Similarity
    "EdgeSignature",
    "signature_histogram",
    "SimilarityBag",
    "SimilarityGrouper",
    "signature_path",
    # Analysis
    "StructureReport",
    "analyze_graph",
    "classify_component",
    # JSON
    "canonical_json",
    "colored_json",
    "dumps",
    "plain_json",
    "similarity_report",
    # Utils
    "lexicographic_order",
    "rank_map",
    "SINGLETON",
    "TOO_LARGE",
]
