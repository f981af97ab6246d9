import pytest
from workgraph.errors import RegistryConflictError
from workgraph.registry import NameRegistry


def test_lookup_both_directions():
    registry = NameRegistry()
    registry.insert("./lib", "example.com/lib")
    assert registry.lookup_canonical("./lib") == "example.com/lib"
    assert registry.lookup_local("example.com/lib") == "./lib"
    assert "./lib" in registry
    assert len(registry) == 1


def test_missing_names_are_not_errors():
    registry = NameRegistry()
    assert registry.lookup_canonical("./nope") is None
    assert registry.lookup_local("example.com/nope") is None


def test_same_pair_twice_is_accepted():
    registry = NameRegistry()
    registry.insert("./lib", "example.com/lib")
    registry.insert("./lib", "example.com/lib")
    assert len(registry) == 1
    assert registry.lookup_local("example.com/lib") == "./lib"


def test_local_path_rebinding_is_rejected():
    registry = NameRegistry("module")
    registry.insert("./lib", "example.com/lib")
    with pytest.raises(RegistryConflictError, match="module path './lib'"):
        registry.insert("./lib", "example.com/other")
    assert registry.lookup_canonical("./lib") == "example.com/lib"
    assert registry.lookup_local("example.com/other") is None


def test_canonical_name_rebinding_is_rejected():
    registry = NameRegistry()
    registry.insert("./lib", "example.com/lib")
    with pytest.raises(RegistryConflictError):
        registry.insert("./lib2", "example.com/lib")
    assert registry.lookup_local("example.com/lib") == "./lib"
    assert "./lib2" not in registry


def test_conflict_is_a_value_error():
    registry = NameRegistry()
    registry.insert("./a", "x")
    with pytest.raises(ValueError):
        registry.insert("./b", "x")
