from typing import Dict, List, Optional


class Module:
    """
    A workspace member module.

    Attributes:
        path (str): Workspace-relative root path, e.g. ``./svc``
        name (str): Canonical module path declared in go.mod
        dependencies (List[str]): Raw dependency specifiers, requires followed
            by replacement targets. Duplicates are kept.
    """

    def __init__(self, path: str, name: str, dependencies: Optional[List[str]] = None):
        self.path = path
        self.name = name
        self.dependencies = dependencies or []

    def __repr__(self) -> str:
        return f"Module(path={self.path}, name={self.name})"


class Package:
    """
    A directory of source files inside a module.

    Attributes:
        path (str): Workspace-relative local path (module root + sub-directory)
        name (str): Canonical import path
        module (str): Local path of the owning module
        files (List[str]): Source files that contributed imports
        imports (List[str]): Unquoted import literals, in file order
    """

    def __init__(
        self,
        path: str,
        name: str,
        module: str,
        files: Optional[List[str]] = None,
        imports: Optional[List[str]] = None,
    ):
        self.path = path
        self.name = name
        self.module = module
        self.files = files or []
        self.imports = imports or []

    def __repr__(self) -> str:
        return f"Package(path={self.path}, name={self.name})"


class Issue:
    """A non-fatal problem met while analysing the workspace"""

    def __init__(self, phase: str, path: str, message: str):
        self.phase = phase
        self.path = path
        self.message = message

    def __eq__(self, other) -> bool:
        if not isinstance(other, Issue):
            return NotImplemented
        return (self.phase, self.path, self.message) == (
            other.phase,
            other.path,
            other.message,
        )

    def __str__(self) -> str:
        return f"[{self.phase}] {self.path}: {self.message}"

    def __repr__(self) -> str:
        return f"Issue(phase={self.phase}, path={self.path})"


class WorkspaceReport:
    """Everything computed by one pipeline run."""

    def __init__(
        self,
        root: str,
        modules: List[Module],
        packages: List[Package],
        module_graph: Dict[str, List[str]],
        package_graph: Dict[str, List[str]],
        issues: Optional[List[Issue]] = None,
    ):
        self.root = root
        self.modules = modules
        self.packages = packages
        self.module_graph = module_graph
        self.package_graph = package_graph
        self.issues = issues or []

    @property
    def complete(self) -> bool:
        """False when skipped files or edges may have under-reported dependencies"""
        return not self.issues

    def __repr__(self) -> str:
        return (
            f"WorkspaceReport(root={self.root}, modules={len(self.modules)}, "
            f"packages={len(self.packages)}, issues={len(self.issues)})"
        )
