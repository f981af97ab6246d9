from workgraph._version import __version__
from workgraph.core import analyze_workspace, get_dependency_graph

__all__ = ["__version__", "analyze_workspace", "get_dependency_graph"]
