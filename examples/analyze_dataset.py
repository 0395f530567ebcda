"""
Analyse the component shapes of an RDF dataset.

Loads the dataset files, classifies every connected component, minimizes the
components into class-collapsed patterns and groups them by edge signature.

Usage:
  python examples/analyze_dataset.py data.nt --namespace http://example.org/ \
      --ontns http://example.org/ontology/ --output report.json
"""
from __future__ import annotations

import argparse
import logging
import time

from lodshapes import config
from lodshapes.analysis.structures import analyze_graph
from lodshapes.canonical.patterns import group_by_canonical_form
from lodshapes.canonical.traversal import CanonicalFormBuilder
from lodshapes.dataset.loader import load_files
from lodshapes.features.component import ComponentFeatures
from lodshapes.io.json_output import canonical_json, dumps, similarity_report
from lodshapes.similarity.grouper import SimilarityGrouper

logger = logging.getLogger("analyze_dataset")


def main():
    parser = argparse.ArgumentParser(
        description="Structural shape analysis of a linked-data graph.",
    )
    parser.add_argument("datasets", nargs="+",
                        help="RDF files (N-Triples, Turtle, ...)")
    parser.add_argument("--name", default="",
                        help="Dataset name used in the report")
    parser.add_argument("--namespace", default="",
                        help="Only keep vertices in this namespace")
    parser.add_argument("--ontns", default="",
                        help="Namespace of the dataset's ontology classes")
    parser.add_argument("--excluded-namespaces", nargs="*", default=[],
                        help="Drop vertices from these namespaces")
    parser.add_argument("--min-component-size", type=int, default=1,
                        help="Skip components smaller than this (default: 1)")
    parser.add_argument("--top-degrees", type=int, default=config.TOP_DEGREES,
                        help=f"Highest degrees to report (default: {config.TOP_DEGREES})")
    parser.add_argument("--max-group-size", type=int, default=config.MAX_GROUP_SIZE,
                        help=f"Largest component to group (default: {config.MAX_GROUP_SIZE})")
    parser.add_argument("--skip-chromatic", action="store_true",
                        help="Do not compute the chromatic number")
    parser.add_argument("--debug", action="store_true",
                        help="Log per-component detail")
    parser.add_argument("--output", default=None,
                        help="Write the JSON report to this file")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    t0 = time.time()
    dataset = load_files(
        args.datasets,
        name=args.name,
        namespace=args.namespace,
        ontology_namespace=args.ontns,
        excluded_namespaces=args.excluded_namespaces,
    )
    logger.info("Loading the dataset took %.1fs", time.time() - t0)

    features = ComponentFeatures(
        dataset.graph,
        dataset.simple_graph,
        catalog=dataset.catalog,
        name="main_graph",
    )

    t0 = time.time()
    report = analyze_graph(
        features,
        min_component_size=args.min_component_size,
        max_diameter_size=config.MAX_DIAMETER_SIZE,
        max_chromatic_size=config.MAX_CHROMATIC_SIZE,
        top_k=args.top_degrees,
        skip_chromatic=args.skip_chromatic,
    )
    logger.info("Analysing the components took %.1fs", time.time() - t0)

    t0 = time.time()
    builder = CanonicalFormBuilder(dataset.catalog)
    patterns = group_by_canonical_form(
        report.components, builder, max_vertices=config.MAX_PATTERN_SIZE
    )
    logger.info("Minimized patterns: %d (%d components skipped)",
                len(patterns.patterns), len(patterns.skipped))

    grouper = SimilarityGrouper(dataset.catalog, max_vertices=args.max_group_size)
    bags = grouper.group(report.components)
    logger.info("Similarity bags: %d (%d components skipped)", len(bags), len(grouper.skipped))
    logger.debug("Grouping took %.1fs", time.time() - t0)

    if args.output:
        document = {
            "name": dataset.name,
            "structure": report.to_dict(),
            "patterns": [
                {"pattern": canonical_json(form), "count": count}
                for form, count in zip(patterns.patterns, patterns.counts())
            ],
            "similarity": similarity_report(bags, dataset.catalog),
        }
        with open(args.output, "w") as f:
            f.write(dumps(document))
        logger.info("Report saved to %s", args.output)


if __name__ == "__main__":
    main()
