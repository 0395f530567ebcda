from .grouper import SimilarityBag, SimilarityGrouper, signature_path
from .signatures import EdgeSignature, edge_signature, signature_histogram, signatures_of

__all__ = [
    "EdgeSignature",
    "edge_signature",
    "signature_histogram",
    "signatures_of",
    "SimilarityBag",
    "SimilarityGrouper",
    "signature_path",
]
