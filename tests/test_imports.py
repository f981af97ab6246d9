import pytest
from workgraph.errors import ImportParseError
from workgraph.imports import extract_imports, parse_imports


def test_single_and_grouped_imports():
    source = parse_imports(
        """// Package handler serves requests.
package handler

import "fmt"

import (
	"net/http"
	u "example.com/lib/util" // aliased
	. "example.com/lib/dot"
	_ "example.com/lib/side"; "strings"
	/* block comment */ `example.com/raw`
)

func Serve() { fmt.Println("import \\"not/an/import\\"") }
"""
    )
    assert source.package_name == "handler"
    assert source.imports == [
        '"fmt"',
        '"net/http"',
        '"example.com/lib/util"',
        '"example.com/lib/dot"',
        '"example.com/lib/side"',
        '"strings"',
        "`example.com/raw`",
    ]


def test_build_constraints_and_no_imports():
    source = parse_imports("//go:build linux\n\n/* doc */\npackage main\n\nfunc main() {}\n")
    assert source.package_name == "main"
    assert source.imports == []


def test_scan_stops_at_first_declaration():
    source = parse_imports('package a\nimport "b"\nvar x = 1\nimport "c"\n')
    assert source.imports == ['"b"']


def test_missing_package_clause():
    with pytest.raises(ImportParseError, match="expected 'package' clause"):
        parse_imports('import "fmt"\n', "x.go")


def test_unterminated_import_block():
    with pytest.raises(ImportParseError, match="import block not terminated"):
        parse_imports('package a\nimport (\n"fmt"\n', "x.go")


def test_missing_import_path():
    with pytest.raises(ImportParseError, match="missing import path") as exc:
        parse_imports("package a\nimport (\n  fmt\n)\n", "x.go")
    assert exc.value.line == 4


def test_extract_imports_from_file(tmp_path):
    path = tmp_path / "a.go"
    path.write_text('package a\n\nimport "example.com/b"\n')
    source = extract_imports(str(path))
    assert source.path == str(path)
    assert source.imports == ['"example.com/b"']


def test_extract_imports_unreadable(tmp_path):
    with pytest.raises(ImportParseError, match="cannot read file"):
        extract_imports(str(tmp_path / "missing.go"))


def test_leading_byte_order_mark(tmp_path):
    path = tmp_path / "bom.go"
    path.write_text('\ufeffpackage bom\n\nimport "example.com/b"\n', encoding="utf-8")
    source = extract_imports(str(path))
    assert source.package_name == "bom"
    assert source.imports == ['"example.com/b"']
