"""Exception hierarchy for workspace analysis."""

from typing import Optional


class WorkgraphError(RuntimeError):
    """Base error for every fatal failure of the pipeline"""


class ManifestError(WorkgraphError):
    """A go.work or go.mod file could not be read or parsed"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        phase: str = "parse",
        line: Optional[int] = None,
    ):
        self.reason = message
        self.path = path
        self.phase = phase
        self.line = line
        location = path or "<manifest>"
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {message}")


class ImportParseError(WorkgraphError):
    """A source file's import declarations could not be scanned"""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        self.path = path
        self.line = line
        location = path or "<source>"
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {message}")


class RegistryConflictError(WorkgraphError, ValueError):
    """A name registry insert would break the local <-> canonical bijection"""


class GraphError(WorkgraphError):
    """An edge could not be inserted into a dependency graph"""

    def __init__(self, message: str, child: str, parent: str):
        self.child = child
        self.parent = parent
        super().__init__(message)
