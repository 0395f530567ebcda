"""
Node-link JSON documents for components, canonical forms and similarity bags.

Component documents number their nodes from 1 in vertex order.  Coloured
documents add the vertex IRI as ``uri`` and its class as ``group``; links
carry the predicate as ``uri`` when the edge has one.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Hashable, Iterator, List, Optional, Sequence, Tuple

from lodshapes.canonical.form import CanonicalForm
from lodshapes.dataset.catalog import ClassCatalog
from lodshapes.features.component import ComponentFeatures
from lodshapes.similarity.grouper import SimilarityBag, signature_path
from lodshapes.utils.ordering import VertexOrder

Document = Dict[str, Any]


def _ordered_edges(component: ComponentFeatures) -> Iterator[Tuple[Hashable, Hashable, Dict[str, Any]]]:
    G = component.graph
    seen = set()
    for u, v in component.edges:
        if (u, v) in seen:
            continue
        seen.add((u, v))
        if G.is_multigraph():
            for _, data in sorted(G[u][v].items(), key=lambda kv: str(kv[0])):
                yield u, v, data
        else:
            yield u, v, G[u][v]


def _component_json(component: ComponentFeatures, catalog: Optional[ClassCatalog]) -> Document:
    ids: Dict[Hashable, int] = {}
    nodes: List[Document] = []
    for i, vertex in enumerate(component.vertices, start=1):
        ids[vertex] = i
        node: Document = {"id": i}
        if catalog is not None:
            node["uri"] = str(vertex)
            node["group"] = catalog.class_of(vertex)
        nodes.append(node)

    links: List[Document] = []
    for u, v, data in _ordered_edges(component):
        link: Document = {}
        if catalog is not None:
            link["uri"] = data.get("predicate", "")
        link["source"] = ids[u]
        link["target"] = ids[v]
        links.append(link)
    return {"nodes": nodes, "links": links}


def plain_json(component: ComponentFeatures) -> Document:
    return _component_json(component, None)


def colored_json(component: ComponentFeatures, catalog: Optional[ClassCatalog] = None) -> Document:
    """Node-link document annotated with IRIs, classes and predicates."""
    return _component_json(component, catalog if catalog is not None else component.catalog)


def canonical_json(form: CanonicalForm) -> Document:
    """Synthetic nodes keep their ids; each carries its class as ``group``."""
    return {
        "directed": form.directed,
        "nodes": [{"id": i, "group": clazz} for i, clazz in form.nodes()],
        "links": [{"source": u, "target": v} for u, v in form.edges],
    }


def similarity_report(
    bags: Sequence[SimilarityBag],
    catalog: ClassCatalog,
    *,
    vertex_order: Optional[VertexOrder] = None,
) -> List[Document]:
    """One entry per bag: member documents, founder path and count deltas."""
    report = []
    for index, bag in enumerate(bags):
        path = signature_path(bag.founder, catalog, vertex_order=vertex_order)
        report.append(
            {
                "bag": index,
                "members": [colored_json(member, catalog) for member in bag.members],
                "path": canonical_json(path),
                "deltas": [
                    {"source": sig.source_class, "target": sig.target_class, "delta": delta}
                    for sig, delta in sorted(bag.deltas.items())
                ],
            }
        )
    return report


def dumps(document: Any) -> str:
    return json.dumps(document, separators=(",", ":"))
