from .limits import SINGLETON, TOO_LARGE, size_skip_reason
from .ordering import VertexOrder, lexicographic_order, rank_map

__all__ = [
    "SINGLETON",
    "TOO_LARGE",
    "size_skip_reason",
    "VertexOrder",
    "lexicographic_order",
    "rank_map",
]
