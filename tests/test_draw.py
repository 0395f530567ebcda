"""Tests for lodshapes.viz (skipped without matplotlib)."""
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import networkx as nx  # noqa: E402

from lodshapes.canonical.form import CanonicalForm  # noqa: E402
from lodshapes.dataset.catalog import ClassCatalog  # noqa: E402
from lodshapes.features.component import ComponentFeatures  # noqa: E402
from lodshapes.similarity.grouper import SimilarityGrouper  # noqa: E402
from lodshapes.viz.draw import draw_canonical_form, draw_similarity_bags  # noqa: E402
from lodshapes.viz.layouts import class_colors  # noqa: E402

CATALOG = ClassCatalog({"a": "Person", "b": "Org", "c": "Person", "d": "Org"})


# --- colours ---

def test_class_colors_are_stable():
    first = class_colors(["Org", "Person"])
    second = class_colors(["Person", "Org", "Person"])
    assert first == second
    assert len(first) == 2


# --- drawing ---

def test_draw_canonical_form():
    form = CanonicalForm(("Hub", "Leaf"), ((0, 1),))
    ax = draw_canonical_form(form)
    assert ax.get_title() == "|V|=2  |E|=1"
    plt.close("all")


def test_draw_canonical_form_too_large():
    form = CanonicalForm(("A",) * 3, ((0, 1), (1, 2)))
    ax = draw_canonical_form(form, max_nodes_to_draw=2)
    assert "Too large to draw" in ax.texts[0].get_text()
    plt.close("all")


def test_draw_similarity_bags_saves_files(tmp_path):
    grouper = SimilarityGrouper(CATALOG)
    bags = grouper.group([
        ComponentFeatures(nx.MultiDiGraph([("a", "b")]), catalog=CATALOG),
        ComponentFeatures(nx.MultiDiGraph([("c", "d")]), catalog=CATALOG),
    ])
    prefix = str(tmp_path / "bags")
    sizes = draw_similarity_bags(bags, CATALOG, save_prefix=prefix)
    assert sizes == [2]
    assert (tmp_path / "bags_bag0.png").exists()
