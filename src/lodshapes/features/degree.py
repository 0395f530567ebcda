from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Optional, Sequence


@dataclass(frozen=True, order=True)
class Degree:
    """A vertex with one of its degrees; records compare by degree only."""

    degree: int
    vertex: Hashable = field(compare=False)


def top_degrees(records: Sequence[Degree], k: int) -> list[Degree]:
    """Return the k records with the highest degree, highest first.

    Ties keep their input order (stable sort).
    """
    if k < 0:
        raise ValueError("k must be >= 0.")
    return sorted(records, key=lambda d: d.degree, reverse=True)[:k]


def average(values: Sequence[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def minimum(values: Sequence[int]) -> Optional[int]:
    return min(values) if values else None


def maximum(values: Sequence[int]) -> Optional[int]:
    return max(values) if values else None


def degree_distribution(values: Iterable[int]) -> dict[int, int]:
    """degree -> number of vertices with that degree, sorted by degree."""
    counts = Counter(values)
    return {d: counts[d] for d in sorted(counts)}
