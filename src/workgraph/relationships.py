# Module and package dependency graphs restricted to workspace members
import logging
from typing import Dict, List

from .config import WorkgraphConfig
from .constants import ERROR_TEMPLATES, PHASE_GRAPH
from .errors import GraphError
from .graph import DependencyGraph
from .registry import NameRegistry
from .types import Issue, Module, Package
from .utils import is_relative_dep, record_issue

logger = logging.getLogger(__name__)


def build_module_graph(
    members: List[str],
    modules: Dict[str, Module],
    registry: NameRegistry,
    config: WorkgraphConfig,
) -> Dict[str, List[str]]:
    """Map each member's local path to the workspace members it depends on."""
    graph = DependencyGraph(allow_cycles=config.allow_cycles)
    for member in members:
        for dep in modules[member].dependencies:
            # dep names a member when it is that member's module path
            target = registry.lookup_local(dep)
            if target is None and (dep in registry or is_relative_dep(dep)):
                if dep not in registry and not config.relative_fallback:
                    logger.debug(f"Dropping unresolved relative dependency {member} -> {dep}")
                    continue
                target = dep
            if target is None:
                continue
            try:
                graph.depend_on(member, target)
            except GraphError as e:
                raise GraphError(
                    ERROR_TEMPLATES["edge_failed"].format(child=member, parent=dep, error=e),
                    member,
                    target,
                ) from e

    # edges from later members may land on earlier ones, so read back only now
    return {member: sorted(graph.dependencies(member)) for member in members}


def build_package_graph(
    members: List[str],
    packages: Dict[str, List[Package]],
    registry: NameRegistry,
    config: WorkgraphConfig,
    issues: List[Issue],
) -> Dict[str, List[str]]:
    """Map each package's canonical name to the workspace packages it imports."""
    graph = DependencyGraph(allow_cycles=config.allow_cycles)
    for member in members:
        for package in packages.get(member, []):
            for literal in package.imports:
                target = registry.lookup_local(literal)
                if target is None or target == package.path:
                    continue
                try:
                    graph.depend_on(package.path, target)
                except GraphError as e:
                    record_issue(
                        issues,
                        PHASE_GRAPH,
                        package.path,
                        ERROR_TEMPLATES["edge_failed"].format(
                            child=package.name, parent=literal, error=e
                        ),
                        config.strict,
                    )

    return {
        package.name: sorted(
            registry.lookup_canonical(dep) for dep in graph.dependencies(package.path)
        )
        for member in members
        for package in packages.get(member, [])
    }
