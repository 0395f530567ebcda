from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from lodshapes.canonical.form import CanonicalForm
from lodshapes.dataset.catalog import ClassCatalog
from lodshapes.similarity.grouper import SimilarityBag, signature_path
from lodshapes.utils.ordering import VertexOrder
from .layouts import base_layout, class_colors


def _too_large(ax, n: int) -> None:
    ax.text(
        0.5,
        0.5,
        f"Too large to draw\n(|V|={n})",
        ha="center",
        va="center",
        transform=ax.transAxes,
    )


def _draw_colored(
    G: nx.Graph,
    groups: Dict,
    colors: Dict,
    ax,
    *,
    seed: int,
    node_size: int,
    edge_width: float,
) -> None:
    nx.draw_networkx(
        G,
        pos=base_layout(G, seed=seed),
        ax=ax,
        with_labels=False,
        node_size=node_size,
        width=edge_width,
        node_color=[colors[groups[v]] for v in G.nodes()],
    )


def draw_canonical_form(
    form: CanonicalForm,
    *,
    ax=None,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    max_nodes_to_draw: int = 600,
    colors: Optional[Dict] = None,
):
    """
    Draw a CanonicalForm with one colour per class.

    Returns the axes drawn on; a new figure is created when ax is None.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(f"|V|={form.vertex_count}  |E|={form.edge_count}")

    if form.vertex_count > max_nodes_to_draw:
        _too_large(ax, form.vertex_count)
        return ax

    G = form.to_networkx()
    if colors is None:
        colors = class_colors(form.classes)
    _draw_colored(G, dict(form.nodes()), colors, ax, seed=seed, node_size=node_size, edge_width=edge_width)
    return ax


def draw_similarity_bags(
    bags: Sequence[SimilarityBag],
    catalog: ClassCatalog,
    *,
    vertex_order: Optional[VertexOrder] = None,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    max_nodes_to_draw: int = 600,
    save_prefix: str | None = None,
) -> List[int]:
    """
    Draw side-by-side the founder of each bag and its abstract signature path.

    If save_prefix is set, saves PNG files:
      {save_prefix}_bag0.png, {save_prefix}_bag1.png, ...

    Returns the member count of every bag.
    """
    sizes = []
    for i, bag in enumerate(bags):
        founder = bag.founder
        path = signature_path(founder, catalog, vertex_order=vertex_order)
        colors = class_colors(list(catalog.classes_of(founder.vertices)) + list(path.classes))

        fig, axes = plt.subplots(1, 2, figsize=(12, 6))
        axF, axP = axes
        axF.set_axis_off()
        axF.set_title(f"bag {i}: {len(bag)} members   |V|={founder.vertex_count}  |E|={founder.edge_count}")

        if founder.vertex_count <= max_nodes_to_draw:
            groups = {v: catalog.class_of(v) for v in founder.vertices}
            _draw_colored(
                founder.graph,
                groups,
                colors,
                axF,
                seed=seed,
                node_size=node_size,
                edge_width=edge_width,
            )
        else:
            _too_large(axF, founder.vertex_count)

        draw_canonical_form(
            path,
            ax=axP,
            seed=seed,
            node_size=node_size,
            edge_width=edge_width,
            max_nodes_to_draw=max_nodes_to_draw,
            colors=colors,
        )

        plt.tight_layout()

        if save_prefix:
            plt.savefig(f"{save_prefix}_bag{i}.png", dpi=200)
            plt.close(fig)
        else:
            plt.show()
        sizes.append(len(bag))

    return sizes
