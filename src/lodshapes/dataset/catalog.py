from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping, Optional


UNKNOWN_CLASS = "unknown"


@dataclass(frozen=True, eq=False)
class ClassCatalog:
    """
    Read-only lookup from vertex identifier to semantic class and label.

    classes: vertex -> class IRI (missing or None means unknown)
    labels:  vertex -> human readable label
    """

    classes: Mapping[Hashable, Optional[str]] = field(default_factory=dict)
    labels: Mapping[Hashable, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @classmethod
    def empty(cls) -> "ClassCatalog":
        return cls()

    def class_of(self, vertex: Hashable) -> str:
        clazz = self.classes.get(vertex)
        if clazz is None:
            return UNKNOWN_CLASS
        return clazz

    def classes_of(self, vertices: Iterable[Hashable]) -> list[str]:
        return [self.class_of(v) for v in vertices]

    def label_of(self, vertex: Hashable) -> Optional[str]:
        return self.labels.get(vertex)

    def known_classes(self) -> frozenset[str]:
        return frozenset(c for c in self.classes.values() if c is not None)

    def __contains__(self, vertex: object) -> bool:
        return self.classes.get(vertex) is not None
