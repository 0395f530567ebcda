"""Tests for lodshapes.canonical: minimizing traversal, forms and pattern groups."""
import networkx as nx
import pytest

from lodshapes.canonical.form import CanonicalForm
from lodshapes.canonical.patterns import group_by_canonical_form
from lodshapes.canonical.traversal import (
    CanonicalFormBuilder,
    MinimizingTraversal,
    TraversalKind,
    incident_edges,
)
from lodshapes.dataset.catalog import UNKNOWN_CLASS, ClassCatalog
from lodshapes.features.component import ComponentFeatures
from lodshapes.utils.limits import SINGLETON, TOO_LARGE


def star(hub, leaves, graph_type=nx.Graph):
    return graph_type([(hub, leaf) for leaf in leaves])


def star_catalog(hub, leaves, leaf_class="Leaf"):
    classes = {hub: "Hub"}
    classes.update({leaf: leaf_class for leaf in leaves})
    return ClassCatalog(classes)


# --- collapse rule ---

def test_star_collapses_to_one_leaf_edge():
    leaves = ["l1", "l2", "l3"]
    G = star("hub", leaves)
    form = CanonicalFormBuilder(star_catalog("hub", leaves)).build(G)
    assert form.edge_count == 1
    assert form.vertex_count == 2
    assert form.classes == ("Hub", "Leaf")
    assert form.edges == ((0, 1),)


def test_leaves_of_different_classes_are_kept():
    G = star("hub", ["m", "z"])
    catalog = ClassCatalog({"hub": "Hub", "m": "Person", "z": "Org"})
    form = CanonicalFormBuilder(catalog).build(G)
    assert form.edge_count == 2
    # neighbours are ordered by class: Org before Person
    assert form.classes == ("Hub", "Org", "Person")


def test_inner_vertices_are_not_collapsed():
    G = nx.Graph([("hub", "m1"), ("hub", "m2"), ("m1", "x1"), ("m2", "x2")])
    catalog = ClassCatalog({"hub": "Hub", "m1": "Mid", "m2": "Mid", "x1": "Leaf", "x2": "Leaf"})
    form = CanonicalFormBuilder(catalog).build(G)
    assert form.vertex_count == 5
    assert form.edge_count == 4


def test_looped_neighbours_are_not_collapsed():
    leaves = ["l1", "l2", "l3"]
    G = star("hub", leaves)
    G.add_edge("l2", "l2")
    form = CanonicalFormBuilder(star_catalog("hub", leaves)).build(G)
    # l1 stands for l3, l2 is kept because its loop lifts its degree
    assert form.edge_count == 2
    assert form.vertex_count == 3


def test_stars_of_different_size_share_a_form():
    builder = CanonicalFormBuilder(
        ClassCatalog({"h1": "Hub", "h2": "Hub", **{f"l{i}": "Leaf" for i in range(10)}})
    )
    small = builder.build(star("h1", ["l0", "l1", "l2"]))
    large = builder.build(star("h2", [f"l{i}" for i in range(3, 10)]))
    assert small == large
    assert hash(small) == hash(large)


def test_unknown_classes_collapse_together():
    form = CanonicalFormBuilder(ClassCatalog.empty()).build(star("hub", ["a", "b", "c"]))
    assert form.classes == (UNKNOWN_CLASS, UNKNOWN_CLASS)


# --- traversal ---

def test_traversal_visits_representatives_only():
    leaves = ["l1", "l2", "l3"]
    visited = list(MinimizingTraversal(star("hub", leaves), star_catalog("hub", leaves)))
    assert visited == ["hub", "l1"]


def test_traversal_restarts_in_other_components():
    G = nx.Graph([("a", "b"), ("c", "d")])
    form = CanonicalFormBuilder(ClassCatalog.empty()).build(G)
    assert form.vertex_count == 4
    assert form.edges == ((0, 1), (2, 3))


def test_traversal_with_start_vertex():
    G = nx.Graph([("a", "b"), ("b", "c")])
    visited = list(MinimizingTraversal(G, ClassCatalog.empty(), start="c"))
    assert visited[0] == "c"
    assert sorted(visited) == ["a", "b", "c"]


def test_traversal_start_vertex_must_exist():
    with pytest.raises(ValueError):
        MinimizingTraversal(nx.Graph([("a", "b")]), ClassCatalog.empty(), start="z")


def test_directed_traversal_follows_out_edges():
    leaves = ["l1", "l2", "l3"]
    G = star("hub", leaves, nx.DiGraph)
    form = CanonicalFormBuilder(star_catalog("hub", leaves), kind=TraversalKind.DIRECTED).build(G)
    assert form.directed is True
    assert form.edge_count == 1


def test_directed_traversal_needs_directed_graph():
    with pytest.raises(TypeError):
        incident_edges(nx.Graph([("a", "b")]), TraversalKind.DIRECTED)


def test_undirected_traversal_of_directed_graph_sees_in_edges():
    G = nx.DiGraph([("b", "a")])
    form = CanonicalFormBuilder(ClassCatalog.empty(), kind=TraversalKind.UNDIRECTED).build(G)
    assert form.edges == ((0, 1),)
    assert form.directed is False


def test_kind_for_graph():
    assert TraversalKind.for_graph(nx.DiGraph()) is TraversalKind.DIRECTED
    assert TraversalKind.for_graph(nx.Graph()) is TraversalKind.UNDIRECTED


# --- forms ---

def test_form_triples_and_networkx():
    form = CanonicalForm(("Hub", "Leaf"), ((0, 1),))
    assert form.triples() == [(0, 1, ("Hub", "Leaf"))]
    G = form.to_networkx()
    assert G.nodes[1]["group"] == "Leaf"
    assert G.number_of_edges() == 1


# --- pattern groups ---

def features(edges, catalog):
    return ComponentFeatures(nx.MultiDiGraph(edges), catalog=catalog)


def test_group_by_canonical_form():
    catalog = ClassCatalog({"h1": "Hub", "h2": "Hub", "h3": "Hub",
                            **{f"l{i}": "Leaf" for i in range(9)}})
    single = nx.MultiDiGraph()
    single.add_node("alone")
    components = [
        features([("h1", "l0"), ("h1", "l1")], catalog),
        features([("h2", "l2"), ("h2", "l3"), ("h2", "l4")], catalog),
        features([("h3", "l5"), ("l5", "l6")], catalog),
        ComponentFeatures(single, catalog=catalog),
    ]
    groups = group_by_canonical_form(components, CanonicalFormBuilder(catalog))
    assert len(groups.patterns) == 2
    assert groups.assignment == {0: 0, 1: 0, 2: 1}
    assert groups.members(0) == [0, 1]
    assert groups.counts() == [2, 1]
    assert groups.skipped == [(3, SINGLETON)]


def test_group_by_canonical_form_skips_large():
    components = [features([("a", "b"), ("b", "c")], ClassCatalog.empty())]
    groups = group_by_canonical_form(components, CanonicalFormBuilder(ClassCatalog.empty()), max_vertices=2)
    assert groups.skipped == [(0, TOO_LARGE)]
    assert groups.patterns == []


def test_group_by_canonical_form_bad_cap():
    with pytest.raises(ValueError):
        group_by_canonical_form([], CanonicalFormBuilder(ClassCatalog.empty()), max_vertices=0)
