from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from lodshapes.canonical.form import CanonicalForm
from lodshapes.canonical.traversal import CanonicalFormBuilder
from lodshapes.features.component import ComponentFeatures
from lodshapes.utils.limits import size_skip_reason

logger = logging.getLogger(__name__)


@dataclass
class PatternGroups:
    """
    Components grouped by identical CanonicalForm.

    patterns:   distinct forms in first-seen order
    assignment: component index -> pattern index
    skipped:    (component index, reason) for components never minimized
    """

    patterns: List[CanonicalForm] = field(default_factory=list)
    assignment: Dict[int, int] = field(default_factory=dict)
    skipped: List[Tuple[int, str]] = field(default_factory=list)

    def members(self, pattern_index: int) -> List[int]:
        return [c for c, p in self.assignment.items() if p == pattern_index]

    def counts(self) -> List[int]:
        out = [0] * len(self.patterns)
        for p in self.assignment.values():
            out[p] += 1
        return out


def group_by_canonical_form(
    components: Sequence[ComponentFeatures],
    builder: CanonicalFormBuilder,
    *,
    max_vertices: int = 200,
) -> PatternGroups:
    """Minimize each component's simple graph and bucket equal forms."""
    if max_vertices < 1:
        raise ValueError("max_vertices must be positive.")
    groups = PatternGroups()
    index_of: Dict[CanonicalForm, int] = {}
    for i, component in enumerate(components):
        reason = size_skip_reason(component.vertex_count, max_vertices)
        if reason is not None:
            groups.skipped.append((i, reason))
            continue

        form = builder.build(component.simple_graph)
        if form not in index_of:
            index_of[form] = len(groups.patterns)
            groups.patterns.append(form)
        groups.assignment[i] = index_of[form]

    logger.debug(
        "%d components -> %d minimized patterns (%d skipped)",
        len(components),
        len(groups.patterns),
        len(groups.skipped),
    )
    return groups
