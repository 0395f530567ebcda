"""Tests for lodshapes.dataset.loader."""
import pytest

from lodshapes.dataset.catalog import UNKNOWN_CLASS
from lodshapes.dataset.loader import load_files, load_lines

RDF_TYPE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#type"
RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"
OWL_CLASS = "http://www.w3.org/2002/07/owl#Class"


def url(name):
    return name if name.startswith("http") else f"http://{name}"


def statement(s, p, o):
    return f"<{url(s)}> <{url(p)}> <{url(o)}> ."


# --- graph construction ---

def test_edges_become_graph():
    ds = load_lines([statement("a", "p", "b"), statement("b", "p", "c")], name="tiny")
    assert ds.name == "tiny"
    assert sorted(ds.graph.nodes()) == ["http://a", "http://b", "http://c"]
    assert ds.graph.number_of_edges() == 2
    assert ds.simple_graph.number_of_edges() == 2


def test_edges_keep_predicate():
    ds = load_lines([statement("a", "knows", "b")])
    (_, _, data), = ds.graph.edges(data=True)
    assert data["predicate"] == "http://knows"


def test_parallel_edges_collapse_in_simple_graph():
    ds = load_lines([
        statement("a", "p", "b"),
        statement("a", "q", "b"),
        statement("b", "p", "a"),
    ])
    assert ds.graph.number_of_edges() == 3
    assert ds.simple_graph.number_of_edges() == 1


def test_self_loops_are_dropped():
    ds = load_lines([statement("a", "p", "a")])
    assert ds.graph.number_of_nodes() == 0


# --- classes and labels ---

def test_types_fill_catalog():
    ds = load_lines(
        [
            statement("a", "p", "b"),
            statement("a", RDF_TYPE, "onto/Person"),
            statement("b", RDF_TYPE, "onto/Org"),
        ],
        ontology_namespace="http://onto/",
    )
    assert ds.catalog.class_of("http://a") == "http://onto/Person"
    assert ds.catalog.class_of("http://b") == "http://onto/Org"
    assert ds.ontology_classes == frozenset({"http://onto/Person", "http://onto/Org"})
    assert "http://onto/Person" not in ds.graph


def test_types_outside_ontology_are_ignored():
    ds = load_lines(
        [statement("a", "p", "b"), statement("a", RDF_TYPE, "other/Thing")],
        ontology_namespace="http://onto/",
    )
    assert ds.catalog.class_of("http://a") == UNKNOWN_CLASS


def test_literal_label():
    ds = load_lines([f'<http://a> <{RDFS_LABEL}> "Alice" .'])
    assert ds.catalog.label_of("http://a") == "Alice"


def test_schema_vertices_are_removed():
    ds = load_lines([statement("a", "p", "b"), statement("b", RDF_TYPE, OWL_CLASS)])
    assert list(ds.graph.nodes()) == ["http://a"]
    assert list(ds.simple_graph.nodes()) == ["http://a"]


# --- namespaces ---

def test_namespace_filter():
    ds = load_lines(
        [statement("ex/a", "p", "ex/b"), statement("ex/b", "p", "other/c")],
        namespace="http://ex/",
    )
    assert sorted(ds.graph.nodes()) == ["http://ex/a", "http://ex/b"]
    assert ds.graph.number_of_edges() == 1


def test_excluded_namespace():
    ds = load_lines(
        [statement("ex/a", "p", "ex/skip/b"), statement("ex/a", "p", "ex/c")],
        namespace="http://ex/",
        excluded_namespaces=["http://ex/skip/"],
    )
    assert sorted(ds.graph.nodes()) == ["http://ex/a", "http://ex/c"]


# --- files ---

def test_load_files(tmp_path):
    path = tmp_path / "data.nt"
    path.write_text("\n".join([statement("a", "p", "b"), statement("c", "p", "d")]) + "\n")
    ds = load_files([str(path)], name="data")
    assert ds.graph.number_of_nodes() == 4
    assert ds.graph.number_of_edges() == 2


def test_load_files_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_files([str(tmp_path / "missing.nt")])
