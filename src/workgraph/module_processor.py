# Manifest resolution for workspace members
import logging
from typing import Dict, List

from .errors import ManifestError, RegistryConflictError
from .manifest import ModFile, WorkFile, read_mod
from .registry import NameRegistry
from .types import Module
from .utils import normalize_dependency_path, to_member_path

logger = logging.getLogger(__name__)


def member_paths(repo_path: str, work: WorkFile) -> List[str]:
    """Workspace members in go.work order, as ``./x`` paths, first occurrence wins"""
    members = []
    for use in work.uses:
        member = to_member_path(repo_path, use)
        if member in members:
            logger.debug(f"Ignoring repeated use {use}")
            continue
        members.append(member)
    return members


def process_modules(
    repo_path: str, members: List[str], registry: NameRegistry
) -> Dict[str, Module]:
    """Read every member's go.mod, register its name and collect raw dependencies."""
    modules = {}
    for member in members:
        mod_file = read_mod(repo_path, member)
        try:
            registry.insert(member, mod_file.module)
        except RegistryConflictError as e:
            raise ManifestError(str(e), mod_file.path, "register") from e
        modules[member] = Module(
            member, mod_file.module, _raw_dependencies(repo_path, member, mod_file)
        )
        logger.debug(
            f"Module {member} ({mod_file.module}): {len(modules[member].dependencies)} dependencies"
        )
    return modules


def _raw_dependencies(repo_path: str, member: str, mod_file: ModFile) -> List[str]:
    # replaces usually restate a require; both are kept
    dependencies = [
        normalize_dependency_path(repo_path, member, require.path)
        for require in mod_file.requires
    ]
    dependencies.extend(
        normalize_dependency_path(repo_path, member, replace.new_path)
        for replace in mod_file.replaces
    )
    return dependencies
