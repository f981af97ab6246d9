"""
Configuration handling for workgraph
"""

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from workgraph.constants import DEFAULT_EXCLUSIONS, SOURCE_SUFFIX
import logging
import tomllib

logger = logging.getLogger(__name__)


class WorkgraphConfig(BaseModel):
    """Main configuration model for workgraph"""

    source_suffix: str = Field(
        default=SOURCE_SUFFIX,
        description="File name suffix identifying source files",
    )
    include_tests: bool = Field(
        default=True, description="Collect imports from _test.go files"
    )
    exclude_patterns: List[str] = Field(
        default=DEFAULT_EXCLUSIONS,
        description="Name patterns skipped while walking module trees",
    )
    skip_nested_modules: bool = Field(
        default=True,
        description="Do not descend into directories holding their own go.mod",
    )
    follow_symlinks: bool = Field(
        default=True, description="Walk into symlinked directories"
    )
    relative_fallback: bool = Field(
        default=True,
        description="Keep unresolved ./ and ../ module dependencies as literal nodes",
    )
    allow_cycles: bool = Field(
        default=False, description="Accept edges that close a dependency cycle"
    )
    strict: bool = Field(
        default=False, description="Raise on the first non-fatal issue"
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("source_suffix")
    @classmethod
    def _suffix_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"source_suffix must look like '.go', got {value!r}")
        return value

    @classmethod
    def from_toml(cls, path: Path) -> "WorkgraphConfig":
        """Load config from TOML file"""
        with open(path, "rb") as f:
            config_data = tomllib.load(f)
        return cls(**config_data.get("tool", {}).get("workgraph", {}))


def load_config(path: Optional[Path] = None) -> WorkgraphConfig:
    """Load configuration from file or return defaults"""
    if path and path.exists():
        logger.debug(f"Loading configuration from {path}")
        return WorkgraphConfig.from_toml(path)
    return WorkgraphConfig()
