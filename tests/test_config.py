import pytest
from pydantic import ValidationError
from workgraph.config import WorkgraphConfig, load_config


def test_config_defaults():
    config = WorkgraphConfig()
    assert config.source_suffix == ".go"
    assert config.exclude_patterns == [".*", "_*", "testdata", "vendor"]
    assert config.include_tests
    assert config.relative_fallback
    assert not config.strict
    assert not config.allow_cycles


def test_load_missing_config_returns_defaults(tmp_path):
    assert load_config(tmp_path / "pyproject.toml") == WorkgraphConfig()
    assert load_config() == WorkgraphConfig()


def test_load_invalid_config(tmp_path):
    bad_config = tmp_path / "pyproject.toml"
    bad_config.write_text("[tool.workgraph]\ninvalid_key = 42")

    with pytest.raises(ValidationError):
        load_config(bad_config)


def test_config_validation():
    with pytest.raises(ValueError):
        WorkgraphConfig(source_suffix="go")


def test_config_from_toml(tmp_path):
    config_file = tmp_path / "workgraph.toml"
    config_file.write_text(
        """
[tool.workgraph]
include_tests = false
exclude_patterns = ["vendor", "examples"]
"""
    )
    config = load_config(config_file)
    assert not config.include_tests
    assert config.exclude_patterns == ["vendor", "examples"]
