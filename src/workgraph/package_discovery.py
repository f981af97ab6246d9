import logging
import os
from typing import Dict, List

from .config import WorkgraphConfig
from .constants import (
    EXTERNAL_TEST_PACKAGE_SUFFIX,
    MOD_FILE,
    PHASE_PARSE,
    PHASE_WALK,
    TEST_SUFFIX,
)
from .errors import ImportParseError, RegistryConflictError
from .imports import extract_imports
from .registry import NameRegistry
from .types import Issue, Module, Package
from .utils import is_excluded, join_import_path, join_local_path, record_issue, trim_quotes

logger = logging.getLogger(__name__)


def find_source_dirs(
    module_root: str, config: WorkgraphConfig, issues: List[Issue]
) -> Dict[str, List[str]]:
    """Map each sub-directory of a module (``""`` for the root) to its source files.

    Directories are walked depth-first in name order. Real paths already
    visited are skipped, which breaks symlink cycles.
    """
    source_dirs = {}
    visited = set()
    stack = [(module_root, "")]
    while stack:
        directory, sub_path = stack.pop()
        real = os.path.realpath(directory)
        if real in visited:
            logger.debug(f"Skipping already visited directory {directory}")
            continue
        visited.add(real)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            record_issue(issues, PHASE_WALK, directory, f"cannot list directory: {e}", config.strict)
            continue

        files = []
        sub_dirs = []
        for entry in entries:
            if is_excluded(entry.name, config.exclude_patterns):
                continue
            try:
                if entry.is_dir(follow_symlinks=config.follow_symlinks):
                    sub_dirs.append(entry)
                elif entry.is_file() and _is_source_file(entry.name, config):
                    files.append(entry.path)
            except OSError as e:
                record_issue(issues, PHASE_WALK, entry.path, f"cannot stat: {e}", config.strict)

        if files:
            source_dirs[sub_path] = files

        for entry in reversed(sub_dirs):
            child = f"{sub_path}/{entry.name}" if sub_path else entry.name
            if config.skip_nested_modules and os.path.isfile(os.path.join(entry.path, MOD_FILE)):
                logger.debug(f"Skipping nested module {entry.path}")
                continue
            stack.append((entry.path, child))
    return source_dirs


def _is_source_file(name: str, config: WorkgraphConfig) -> bool:
    if not name.endswith(config.source_suffix) or name == config.source_suffix:
        return False
    return config.include_tests or not name.endswith(TEST_SUFFIX)


def find_packages(
    repo_path: str,
    module: Module,
    registry: NameRegistry,
    config: WorkgraphConfig,
    issues: List[Issue],
) -> List[Package]:
    """Discover the packages of one member module and register their names."""
    module_root = os.path.normpath(os.path.join(repo_path, module.path))
    packages = []
    for sub_path, files in sorted(find_source_dirs(module_root, config, issues).items()):
        package = Package(
            join_local_path(module.path, sub_path),
            join_import_path(module.name, sub_path),
            module.path,
        )
        try:
            registry.insert(package.path, package.name)
        except RegistryConflictError as e:
            record_issue(issues, PHASE_WALK, package.path, str(e), config.strict)
            continue

        for file_path in files:
            try:
                source = extract_imports(file_path)
            except ImportParseError as e:
                record_issue(issues, PHASE_PARSE, file_path, str(e), config.strict)
                continue
            if source.package_name.endswith(EXTERNAL_TEST_PACKAGE_SUFFIX):
                # external test package, not part of this package's graph
                logger.debug(f"Skipping imports of external test {file_path}")
                continue
            package.files.append(file_path)
            package.imports.extend(trim_quotes(literal) for literal in source.imports)
        packages.append(package)
    logger.debug(f"Module {module.path}: {len(packages)} packages")
    return packages
