import fnmatch
import logging
import os
from typing import Iterable, List

from workgraph.constants import RELATIVE_MARKERS, ROOT_PATH
from workgraph.errors import WorkgraphError
from workgraph.types import Issue

logger = logging.getLogger(__name__)


def is_relative_dep(path: str) -> bool:
    """True if the dependency is written relative to its module (./ or ../)"""
    return path.startswith(RELATIVE_MARKERS)


def normalize_dependency_path(repo_path: str, module_path: str, dependency: str) -> str:
    """Rewrite a module-relative dependency so it is relative to the workspace root.

    Non-relative dependencies (canonical module paths such as
    ``example.com/lib``) are returned unchanged. Relative ones are resolved
    against the declaring module and re-expressed from the workspace root:
    ``../b`` declared by ``./a`` becomes ``./b``, a path landing on the root
    itself becomes ``.``, and one escaping the root keeps its leading ``../``.
    """
    if not is_relative_dep(dependency):
        return dependency

    # repo/./module => repo/module
    full_module_path = os.path.normpath(os.path.join(repo_path, module_path))
    # repo/module/../dependency => repo/dependency
    full_dependency_path = os.path.normpath(os.path.join(full_module_path, dependency))
    trimmed = os.path.relpath(full_dependency_path, os.path.normpath(repo_path))
    trimmed = trimmed.replace(os.sep, "/")

    if trimmed == ROOT_PATH:
        return ROOT_PATH
    if trimmed.startswith("../") or trimmed == "..":
        return trimmed
    return f"./{trimmed}"


def to_member_path(repo_path: str, use_path: str) -> str:
    """Canonical ``./x`` form of a go.work ``use`` path"""
    if os.path.isabs(use_path):
        use_path = os.path.relpath(use_path, repo_path).replace(os.sep, "/")
    use_path = use_path.rstrip("/") or ROOT_PATH
    if use_path != ROOT_PATH and not is_relative_dep(use_path):
        use_path = f"./{use_path}"
    if use_path == ROOT_PATH:
        return ROOT_PATH
    return normalize_dependency_path(repo_path, ROOT_PATH, use_path)


def join_local_path(module_path: str, sub_path: str) -> str:
    """Local path of a package: module root plus its sub-directory"""
    if not sub_path:
        return module_path
    if module_path == ROOT_PATH:
        return f"./{sub_path}"
    return f"{module_path}/{sub_path}"


def join_import_path(module_name: str, sub_path: str) -> str:
    """Canonical import path of a package inside ``module_name``"""
    if not sub_path:
        return module_name
    return f"{module_name}/{sub_path}"


def trim_quotes(literal: str) -> str:
    """Strip one layer of surrounding quote characters from an import literal"""
    for quote in ('"', "`"):
        if len(literal) >= 2 and literal[0] == quote and literal[-1] == quote:
            return literal[1:-1]
    return literal


def is_excluded(name: str, exclude_patterns: Iterable[str]) -> bool:
    """Check if a file or directory name matches any exclude pattern"""
    return any(fnmatch.fnmatch(name, pattern) for pattern in exclude_patterns)


def record_issue(issues: List[Issue], phase: str, path: str, message: str, strict: bool = False) -> None:
    """Log a non-fatal problem and keep it, or raise it in strict mode"""
    issue = Issue(phase, path, message)
    if strict:
        raise WorkgraphError(str(issue))
    logger.warning(f"⚠️  {issue}")
    issues.append(issue)
