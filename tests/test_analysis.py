"""Tests for lodshapes.analysis.structures."""
import logging

import networkx as nx
import pytest

from lodshapes.analysis.structures import analyze_graph, classify_component, size_counts
from lodshapes.features.component import ComponentFeatures
from lodshapes.utils.limits import TOO_LARGE

PATH = [("a", "b"), ("b", "c")]
STAR = [("hub", "l1"), ("hub", "l2"), ("hub", "l3")]
TRIANGLE = [("x", "y"), ("y", "z"), ("x", "z")]
PENTAGON = [("u1", "u2"), ("u2", "u3"), ("u3", "u4"), ("u4", "u5"), ("u5", "u1")]


def features(*edge_lists):
    G = nx.MultiDiGraph()
    for edges in edge_lists:
        G.add_edges_from(edges)
    return ComponentFeatures(G, name="main_graph")


# --- classification ---

def test_classify_path():
    result = classify_component(features(PATH))
    assert result.families == ["tree", "bipartite", "path", "directed path"]
    assert result.skipped == []


def test_classify_star():
    result = classify_component(features(STAR))
    assert result.families == ["tree", "caterpillar", "bipartite", "star", "outbound star"]


def test_classify_triangle():
    assert classify_component(features(TRIANGLE)).families == ["complete"]


def test_classify_pentagon_unrecognized():
    result = classify_component(features(PENTAGON))
    assert result.families == []
    assert result.recognized is False


def test_classify_skips_path_and_star_checks_when_large():
    result = classify_component(features(PATH), max_diameter_size=3)
    assert result.families == ["tree", "bipartite"]
    assert result.skipped == ["path", "star"]


def test_size_counts():
    assert size_counts([{1, 2}, {3}, {4, 5}, {6, 7, 8}]) == {1: 1, 2: 2, 3: 1}


# --- whole graph ---

def test_analyze_graph_families():
    report = analyze_graph(features(PATH, STAR, TRIANGLE, PENTAGON))
    assert report.vertex_count == 15
    assert report.edge_count == 13
    assert report.connected is False
    assert report.connected_sizes == {3: 2, 4: 1, 5: 1}
    assert report.strongly_connected_sizes == {1: 10, 5: 1}
    counts = report.family_counts()
    assert counts["tree"] == 2
    assert counts["caterpillar"] == 1
    assert counts["complete"] == 1
    assert counts["outbound star"] == 1
    assert counts["directed path"] == 1
    assert len(report.unrecognized) == 1
    assert report.unrecognized[0].vertex_count == 5


def test_analyze_graph_summaries():
    report = analyze_graph(features(PATH, STAR, TRIANGLE, PENTAGON), top_k=1)
    assert [s.vertex_count for s in report.summaries] == [3, 3, 4, 5]
    star = report.summaries[2]
    assert star.diameter == 1
    assert [d.vertex for d in star.max_out_degrees] == ["hub"]


def test_analyze_graph_min_component_size():
    report = analyze_graph(features(PATH, STAR, TRIANGLE, PENTAGON), min_component_size=4)
    assert [s.vertex_count for s in report.summaries] == [4, 5]
    assert len(report.components) == 4


def test_analyze_graph_large_components_skip_diameter():
    report = analyze_graph(features(PENTAGON), max_diameter_size=5)
    summary = report.summaries[0]
    assert summary.diameter == TOO_LARGE
    assert summary.skipped == ["path", "star"]


def test_analyze_graph_degrees_and_chromatic():
    report = analyze_graph(features(PATH, STAR, TRIANGLE, PENTAGON))
    assert report.max_outdegree == 3
    assert report.highest_outdegrees[0].vertex == "hub"
    assert report.chromatic_number == 3
    assert report.degree_distribution[3] == 1


def test_analyze_graph_skip_chromatic():
    report = analyze_graph(features(PATH), skip_chromatic=True)
    assert report.chromatic_number is None


def test_analyze_graph_large_graph_skips_chromatic(caplog):
    with caplog.at_level(logging.WARNING, logger="lodshapes.analysis.structures"):
        report = analyze_graph(features(PATH), max_chromatic_size=2)
    assert report.chromatic_number == TOO_LARGE
    assert report.to_dict()["chromatic_number"] == TOO_LARGE
    assert "chromatic number" in caplog.text


def test_analyze_graph_chromatic_at_cap():
    g = features(PATH)
    report = analyze_graph(g, max_chromatic_size=g.vertex_count)
    assert report.chromatic_number == 2


def test_analyze_graph_negative_top_k():
    with pytest.raises(ValueError):
        analyze_graph(features(PATH), top_k=-1)


def test_analyze_graph_to_dict():
    doc = analyze_graph(features(PATH, STAR)).to_dict()
    assert doc["vertices"] == 7
    assert doc["families"]["path"] == 1
    assert doc["highest_outdegrees"][0] == ("hub", 3)


def test_analyze_graph_logs(caplog):
    with caplog.at_level(logging.INFO, logger="lodshapes.analysis.structures"):
        analyze_graph(features(PATH))
    assert "Connectivity: yes" in caplog.text
