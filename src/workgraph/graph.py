"""Directed dependency graph backed by networkx."""

import logging
from typing import Set

import networkx as nx

from workgraph.errors import GraphError

logger = logging.getLogger(__name__)


class DependencyGraph:
    """Edges point from a node to the nodes it depends on.

    Inserting an existing edge is a no-op. Self-references are rejected, and
    so is any edge that would close a cycle unless ``allow_cycles`` is set.
    """

    def __init__(self, allow_cycles: bool = False):
        self.allow_cycles = allow_cycles
        self.graph = nx.DiGraph()

    def depend_on(self, child: str, parent: str) -> None:
        if child == parent:
            raise GraphError("self-referential dependencies not allowed", child, parent)
        if self.graph.has_edge(child, parent):
            return
        if (
            not self.allow_cycles
            and self.graph.has_node(parent)
            and self.graph.has_node(child)
            and nx.has_path(self.graph, parent, child)
        ):
            raise GraphError("circular dependencies not allowed", child, parent)
        self.graph.add_edge(child, parent)

    def dependencies(self, node: str) -> Set[str]:
        """Direct dependencies of ``node``; empty for unknown nodes"""
        if not self.graph.has_node(node):
            return set()
        return set(self.graph.successors(node))

