from workgraph.config import WorkgraphConfig
from workgraph.registry import NameRegistry
from workgraph.relationships import build_package_graph
from workgraph.types import Package


def test_package_importing_itself_is_not_an_edge():
    registry = NameRegistry("package")
    registry.insert("./m/foo", "example.com/m/foo")
    registry.insert("./m/bar", "example.com/m/bar")
    packages = {
        "./m": [
            Package(
                "./m/foo",
                "example.com/m/foo",
                "./m",
                imports=["example.com/m/foo", "example.com/m/bar"],
            ),
            Package("./m/bar", "example.com/m/bar", "./m"),
        ]
    }
    issues = []
    graph = build_package_graph(
        ["./m"], packages, registry, WorkgraphConfig(strict=True), issues
    )
    assert graph == {"example.com/m/foo": ["example.com/m/bar"], "example.com/m/bar": []}
    assert issues == []


def test_package_cycle_becomes_issue():
    registry = NameRegistry("package")
    registry.insert("./m/a", "example.com/m/a")
    registry.insert("./m/b", "example.com/m/b")
    packages = {
        "./m": [
            Package("./m/a", "example.com/m/a", "./m", imports=["example.com/m/b"]),
            Package("./m/b", "example.com/m/b", "./m", imports=["example.com/m/a"]),
        ]
    }
    issues = []
    graph = build_package_graph(["./m"], packages, registry, WorkgraphConfig(), issues)
    assert graph == {"example.com/m/a": ["example.com/m/b"], "example.com/m/b": []}
    assert [issue.phase for issue in issues] == ["graph"]
