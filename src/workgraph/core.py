# Workspace analysis pipeline
import logging
import os
from datetime import datetime
from typing import Dict, List, Optional

from .config import WorkgraphConfig
from .manifest import read_work
from .module_processor import member_paths, process_modules
from .package_discovery import find_packages
from .registry import NameRegistry
from .relationships import build_module_graph, build_package_graph
from .types import Issue, WorkspaceReport

logger = logging.getLogger(__name__)


def analyze_workspace(
    repo_path: str,
    config: Optional[WorkgraphConfig] = None,
    verbose: bool = False,
) -> WorkspaceReport:
    """
    Compute the module and package dependency graphs of a Go workspace.

    Args:
        repo_path (str): Directory holding the go.work file
        config (WorkgraphConfig, optional): Analysis settings. Defaults to None.
        verbose (bool, optional): Log phase progress at INFO. Defaults to False.

    Raises:
        ManifestError: If go.work or a member's go.mod is missing or malformed
        GraphError: If a module dependency edge cannot be inserted
        WorkgraphError: On the first non-fatal issue when ``config.strict`` is set
    """
    config = config or WorkgraphConfig()
    repo_path = os.path.normpath(str(repo_path))
    start = datetime.now()
    issues: List[Issue] = []

    work = read_work(repo_path)
    members = member_paths(repo_path, work)
    if verbose:
        logger.info(f"📦 {len(members)} workspace members in {repo_path}")

    module_names = NameRegistry("module")
    modules = process_modules(repo_path, members, module_names)
    module_graph = build_module_graph(members, modules, module_names, config)

    package_names = NameRegistry("package")
    packages = {}
    for member in members:
        packages[member] = find_packages(
            repo_path, modules[member], package_names, config, issues
        )
    if verbose:
        total = sum(len(p) for p in packages.values())
        logger.info(f"🔍 Found {total} packages")

    package_graph = build_package_graph(members, packages, package_names, config, issues)

    if verbose:
        duration = datetime.now() - start
        logger.info(f"🏁 Analysis completed in {duration.total_seconds():.3f}s")
    if issues:
        logger.warning(
            f"{len(issues)} issues during analysis; dependencies may be under-reported"
        )

    return WorkspaceReport(
        root=repo_path,
        modules=[modules[m] for m in members],
        packages=[p for m in members for p in packages[m]],
        module_graph=module_graph,
        package_graph=package_graph,
        issues=issues,
    )


def get_dependency_graph(
    repo_path: str, config: Optional[WorkgraphConfig] = None
) -> Dict[str, List[str]]:
    """Canonical package name -> canonical names of the workspace packages it imports"""
    return analyze_workspace(repo_path, config).package_graph
