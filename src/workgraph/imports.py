"""
Imports-only scanner for Go source files.

Reads the package clause and the import declarations that follow it and stops
at the first other top-level declaration, so function bodies are never
tokenized.
"""

import logging
import re
from typing import Iterator, List, Tuple

from workgraph.errors import ImportParseError

logger = logging.getLogger(__name__)

_IDENT = re.compile(r"[^\W\d]\w*")
_SPACE = re.compile(r"[ \t\r\n]+")


class SourceFile:
    """Package clause and raw import literals of one source file"""

    def __init__(self, path: str, package_name: str, imports: List[str]):
        self.path = path
        self.package_name = package_name
        self.imports = imports

    def __repr__(self) -> str:
        return f"SourceFile(path={self.path}, package={self.package_name})"


def _tokens(src: str, path: str) -> Iterator[Tuple[str, str, int]]:
    """Yield (kind, text, line) with comments and whitespace dropped"""
    pos, line = 0, 1
    while pos < len(src):
        ch = src[pos]
        match = _SPACE.match(src, pos)
        if match:
            line += match.group().count("\n")
            pos = match.end()
            continue
        if src.startswith("//", pos):
            end = src.find("\n", pos)
            pos = len(src) if end < 0 else end
            continue
        if src.startswith("/*", pos):
            end = src.find("*/", pos + 2)
            if end < 0:
                raise ImportParseError("comment not terminated", path, line)
            line += src.count("\n", pos, end)
            pos = end + 2
            continue
        if ch == '"':
            end = pos + 1
            while end < len(src) and src[end] not in '"\n':
                end += 2 if src[end] == "\\" else 1
            if end >= len(src) or src[end] != '"':
                raise ImportParseError("string literal not terminated", path, line)
            yield "string", src[pos : end + 1], line
            pos = end + 1
            continue
        if ch == "`":
            end = src.find("`", pos + 1)
            if end < 0:
                raise ImportParseError("raw string literal not terminated", path, line)
            yield "string", src[pos : end + 1], line
            line += src.count("\n", pos, end)
            pos = end + 1
            continue
        match = _IDENT.match(src, pos)
        if match:
            yield "ident", match.group(), line
            pos = match.end()
            continue
        yield "punct", ch, line
        pos += 1


def _import_spec(tok: Tuple[str, str, int], tokens: Iterator, path: str) -> str:
    kind, text, line = tok
    if kind == "ident" or text == ".":
        kind, text, line = next(tokens, ("eof", "", line))
    if kind != "string":
        raise ImportParseError(f"missing import path; found {text or 'EOF'!r}", path, line)
    return text


def parse_imports(src: str, path: str = "<source>") -> SourceFile:
    """Scan Go source text and return its package name and import literals.

    Import literals keep their surrounding quotes.
    """
    tokens = _tokens(src.removeprefix("\ufeff"), path)
    kind, text, line = next(tokens, ("eof", "", 1))
    if text != "package":
        raise ImportParseError("expected 'package' clause", path, line)
    kind, package_name, line = next(tokens, ("eof", "", line))
    if kind != "ident":
        raise ImportParseError("expected package name", path, line)

    imports = []
    for kind, text, line in tokens:
        if text == ";":
            continue
        if text != "import":
            break
        tok = next(tokens, ("eof", "", line))
        if tok[1] != "(":
            imports.append(_import_spec(tok, tokens, path))
            continue
        for tok in tokens:
            if tok[1] == ")":
                break
            if tok[1] == ";":
                continue
            imports.append(_import_spec(tok, tokens, path))
        else:
            raise ImportParseError("import block not terminated", path, line)
    return SourceFile(path, package_name, imports)


def extract_imports(file_path: str) -> SourceFile:
    """Read a source file and scan its imports"""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            src = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ImportParseError(f"cannot read file: {e}", file_path) from e
    source = parse_imports(src, file_path)
    logger.debug(f"{file_path}: package {source.package_name}, {len(source.imports)} imports")
    return source
