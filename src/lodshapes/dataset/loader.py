"""Read RDF triples into the directed multigraph, simple graph and class catalog."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Sequence

import networkx as nx
from rdflib import Graph as RDFGraph
from rdflib import Literal, URIRef
from rdflib.namespace import OWL, RDF, RDFS
from rdflib.util import guess_format

from .catalog import ClassCatalog

logger = logging.getLogger(__name__)

# type objects whose subjects are schema, not instance data
_SCHEMA_TYPES = frozenset({str(RDF.Property), str(RDFS.Class), str(OWL.Class)})


@dataclass(frozen=True, eq=False)
class Dataset:
    name: str
    graph: nx.MultiDiGraph
    simple_graph: nx.Graph
    catalog: ClassCatalog
    ontology_classes: frozenset[str]


class _TripleReader:
    def __init__(
        self,
        namespace: str,
        ontology_namespace: str,
        excluded_namespaces: Sequence[str],
    ) -> None:
        self.namespace = namespace
        self.ontology_namespace = ontology_namespace
        self.excluded_namespaces = tuple(excluded_namespaces)
        self.graph = nx.MultiDiGraph()
        self.simple_graph = nx.Graph()
        self.classes: dict[str, str] = {}
        self.labels: dict[str, str] = {}
        self.ontology_classes: set[str] = set()
        self.remove: set[str] = set()

    def _add_vertex(self, v: str) -> None:
        if v not in self.graph:
            self.graph.add_node(v)
            self.simple_graph.add_node(v)

    def read(self, rdf_graph: RDFGraph) -> None:
        # rdflib stores triples in a set; sort to make "first type wins" reproducible
        triples = sorted(rdf_graph, key=lambda t: (str(t[0]), str(t[1]), str(t[2])))
        for s, p, o in triples:
            subject, prop, obj = str(s), str(p), str(o)

            if prop == str(RDFS.label) and isinstance(o, Literal):
                self.labels[subject] = obj
                continue
            if not (isinstance(s, URIRef) and isinstance(p, URIRef) and isinstance(o, URIRef)):
                continue
            if subject == obj:
                continue

            if prop == str(RDFS.label):
                self.labels[subject] = obj
            if prop == str(RDF.type):
                if obj in _SCHEMA_TYPES:
                    self.remove.update((subject, obj))
                elif obj.startswith(self.ontology_namespace) and subject not in self.classes:
                    self.classes[subject] = obj
                    self.ontology_classes.add(obj)
                    self._add_vertex(subject)
            elif prop == str(OWL.equivalentClass):
                self.remove.update((subject, obj))
            elif prop == str(RDFS.subClassOf):
                self.ontology_classes.update((subject, obj))
            elif not subject.startswith(self.namespace):
                self.remove.add(subject)
            elif not obj.startswith(self.namespace):
                self.remove.add(obj)
            else:
                excluded = self._excluded(subject, obj)
                if excluded is not None:
                    self.remove.add(excluded)
                    continue
                self._add_vertex(subject)
                self._add_vertex(obj)
                self.graph.add_edge(subject, obj, predicate=prop)
                if not self.simple_graph.has_edge(subject, obj):
                    self.simple_graph.add_edge(subject, obj, predicate=prop)

    def _excluded(self, subject: str, obj: str) -> str | None:
        for ns in self.excluded_namespaces:
            if subject.startswith(ns):
                return subject
            if obj.startswith(ns):
                return obj
        return None

    def finish(self, name: str) -> Dataset:
        doomed = [v for v in self.remove if v in self.graph]
        self.graph.remove_nodes_from(doomed)
        self.simple_graph.remove_nodes_from(doomed)
        return Dataset(
            name=name,
            graph=self.graph,
            simple_graph=self.simple_graph,
            catalog=ClassCatalog(self.classes, self.labels),
            ontology_classes=frozenset(self.ontology_classes),
        )


def load_lines(
    lines: Iterable[str],
    *,
    name: str = "",
    namespace: str = "",
    ontology_namespace: str = "",
    excluded_namespaces: Sequence[str] = (),
) -> Dataset:
    """Build a Dataset from N-Triples lines."""
    rdf_graph = RDFGraph()
    rdf_graph.parse(data="\n".join(lines), format="nt")
    reader = _TripleReader(namespace, ontology_namespace, excluded_namespaces)
    reader.read(rdf_graph)
    return reader.finish(name)


def load_files(
    paths: Sequence[str],
    *,
    name: str = "",
    namespace: str = "",
    ontology_namespace: str = "",
    excluded_namespaces: Sequence[str] = (),
) -> Dataset:
    """Build a Dataset from RDF files (format guessed from the suffix, N-Triples otherwise)."""
    logger.info("excluded namespaces: %s", list(excluded_namespaces))
    reader = _TripleReader(namespace, ontology_namespace, excluded_namespaces)
    for path in paths:
        if not os.path.exists(path):
            raise FileNotFoundError(f"dataset not found: {path}")
        rdf_graph = RDFGraph()
        rdf_graph.parse(path, format=guess_format(path) or "nt")
        reader.read(rdf_graph)
        logger.info("Finished reading %s", path)
        logger.info("Found %d vertices.", reader.graph.number_of_nodes())
    return reader.finish(name)
