from __future__ import annotations

from typing import Optional


TOO_LARGE = "skipped: too large"
SINGLETON = "skipped: singleton"


def size_skip_reason(vertex_count: int, max_vertices: int) -> Optional[str]:
    """Reason to leave a component out of grouping, or None to keep it."""
    if max_vertices < 1:
        raise ValueError("max_vertices must be positive.")
    if vertex_count > max_vertices:
        return TOO_LARGE
    if vertex_count == 1:
        return SINGLETON
    return None
