from __future__ import annotations

from typing import Dict, Iterable, Tuple

import matplotlib
import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    undirected = nx.Graph(G)
    is_planar, _ = nx.check_planarity(undirected)
    if is_planar:
        return nx.planar_layout(undirected)
    return nx.spring_layout(G, seed=seed, iterations=300)


def class_colors(classes: Iterable[str], cmap: str = "tab20") -> Dict[str, Tuple[float, float, float, float]]:
    """
    Stable class -> RGBA mapping.

    Classes are sorted before colours are handed out, so the same set of
    classes always gets the same colours.
    """
    palette = matplotlib.colormaps[cmap]
    return {clazz: palette(i % palette.N) for i, clazz in enumerate(sorted(set(classes)))}
