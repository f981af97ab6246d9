import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def write_tree(tmp_path):
    """Write ``{relative path: content}`` under tmp_path and return the root"""

    def _write(files: dict) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip())
        return tmp_path

    return _write


@pytest.fixture
def svc_lib_workspace(write_tree):
    """Two members: ./svc requires ./lib by module path"""
    return write_tree(
        {
            "go.work": """
                go 1.22

                use (
                    ./svc
                    ./lib
                )
            """,
            "svc/go.mod": """
                module example.com/svc

                go 1.22

                require (
                    example.com/lib v0.0.0
                    github.com/google/uuid v1.6.0 // indirect
                )
            """,
            "svc/main.go": """
                package main

                import (
                    "fmt"

                    "example.com/svc/handler"
                )

                func main() { fmt.Println(handler.Name) }
            """,
            "svc/handler/handler.go": """
                package handler

                import "example.com/lib/util"

                var Name = util.Name()
            """,
            "lib/go.mod": """
                module example.com/lib

                go 1.22
            """,
            "lib/util/util.go": """
                package util

                import "strings"

                func Name() string { return strings.ToUpper("lib") }
            """,
        }
    )
