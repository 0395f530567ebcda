from __future__ import annotations

from typing import Callable, Hashable, Iterable


VertexOrder = Callable[[Iterable[Hashable]], list]


def lexicographic_order(vertices: Iterable[Hashable]) -> list:
    """Sort vertices by their string form.

    This is the default total order used to pin every traversal, tie-break
    and iteration in the package.
    """
    return sorted(vertices, key=str)


def rank_map(order: list) -> dict[Hashable, int]:
    """Map each vertex to its position in *order*."""
    return {v: i for i, v in enumerate(order)}
