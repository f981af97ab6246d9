"""
Centralized constants for workgraph

Organized into sections:
- Manifest Files
- Source Discovery
- Path Handling
- Default Configuration
"""

# Manifest Files
WORK_FILE = "go.work"
MOD_FILE = "go.mod"

WORK_VERBS = {"go", "toolchain", "use", "replace", "godebug"}
MOD_VERBS = {
    "module",
    "go",
    "toolchain",
    "require",
    "replace",
    "exclude",
    "retract",
    "godebug",
    "tool",
    "ignore",
}
BLOCK_VERBS = {"use", "require", "replace", "exclude", "retract", "godebug", "tool", "ignore"}

INDIRECT_MARKER = "indirect"

# Source Discovery
SOURCE_SUFFIX = ".go"
TEST_SUFFIX = "_test.go"
EXTERNAL_TEST_PACKAGE_SUFFIX = "_test"

# Path Handling
RELATIVE_MARKERS = ("./", "../")
ROOT_PATH = "."

# Default Configuration
DEFAULT_EXCLUSIONS = [
    ".*",
    "_*",
    "testdata",
    "vendor",
]

# Issue phases
PHASE_WALK = "walk"
PHASE_PARSE = "parse"
PHASE_READ = "read"
PHASE_GRAPH = "graph"

ERROR_TEMPLATES = {
    "missing_work": "{file} file not found in {root}",
    "read_failed": "failed to read {file} for {member}: {error}",
    "parse_failed": "failed to parse {file} for {member}: {error}",
    "edge_failed": "failed to add dependency {child} -> {parent}: {error}",
    "registry_conflict": "{side} {key!r} is already bound to {existing!r}, refusing {value!r}",
}
