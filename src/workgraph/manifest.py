"""
Line-oriented parser for go.work and go.mod manifests.

Only the directives needed to map a workspace are interpreted; the remaining
verbs are validated for shape and kept verbatim.
"""

import json
import logging
import os
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from workgraph.constants import (
    BLOCK_VERBS,
    ERROR_TEMPLATES,
    INDIRECT_MARKER,
    MOD_FILE,
    MOD_VERBS,
    PHASE_PARSE,
    PHASE_READ,
    WORK_FILE,
    WORK_VERBS,
)
from workgraph.errors import ManifestError
from workgraph.utils import is_relative_dep

logger = logging.getLogger(__name__)


class Require(BaseModel):
    path: str
    version: str
    indirect: bool = False


class Replace(BaseModel):
    old_path: str
    old_version: Optional[str] = None
    new_path: str
    new_version: Optional[str] = None


class ModFile(BaseModel):
    path: str
    module: str
    go: Optional[str] = None
    toolchain: Optional[str] = None
    requires: List[Require] = Field(default_factory=list)
    replaces: List[Replace] = Field(default_factory=list)
    excludes: List[Require] = Field(default_factory=list)
    retracts: List[str] = Field(default_factory=list)


class WorkFile(BaseModel):
    path: str
    go: Optional[str] = None
    toolchain: Optional[str] = None
    uses: List[str] = Field(default_factory=list)
    replaces: List[Replace] = Field(default_factory=list)


def _tokenize(line: str, lineno: int, path: str) -> Tuple[List[str], str]:
    """Split one manifest line into tokens and its trailing comment"""
    tokens = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch in " \t\r":
            i += 1
        elif line.startswith("//", i):
            return tokens, line[i + 2 :].strip()
        elif ch in "()":
            tokens.append(ch)
            i += 1
        elif line.startswith("=>", i):
            tokens.append("=>")
            i += 2
        elif ch == '"':
            end = i + 1
            while end < len(line) and line[end] != '"':
                end += 2 if line[end] == "\\" else 1
            if end >= len(line):
                raise ManifestError("unterminated quoted string", path, PHASE_PARSE, lineno)
            try:
                tokens.append(json.loads(line[i : end + 1]))
            except ValueError as e:
                raise ManifestError(f"invalid quoted string: {e}", path, PHASE_PARSE, lineno) from e
            i = end + 1
        elif ch == "`":
            end = line.find("`", i + 1)
            if end < 0:
                raise ManifestError("unterminated raw string", path, PHASE_PARSE, lineno)
            tokens.append(line[i + 1 : end])
            i = end + 1
        else:
            end = i
            while end < len(line) and line[end] not in ' \t\r()"`' and not line.startswith(("//", "=>"), end):
                end += 1
            tokens.append(line[i:end])
            i = end
    return tokens, ""


def _iter_directives(text: str, path: str, verbs: set):
    """Yield (verb, args, comment, lineno) with blocks flattened"""
    block_verb = None
    block_start = 0
    for lineno, line in enumerate(text.splitlines(), 1):
        tokens, comment = _tokenize(line, lineno, path)
        if not tokens:
            continue
        if block_verb is not None:
            if tokens == [")"]:
                block_verb = None
                continue
            yield block_verb, tokens, comment, lineno
            continue

        verb, args = tokens[0], tokens[1:]
        if verb not in verbs:
            raise ManifestError(f"unknown directive: {verb}", path, PHASE_PARSE, lineno)
        if args[:1] == ["("]:
            if verb not in BLOCK_VERBS:
                raise ManifestError(f"{verb} does not accept a block", path, PHASE_PARSE, lineno)
            if args == ["(", ")"]:
                continue
            if len(args) != 1:
                raise ManifestError(f"unexpected tokens after {verb} (", path, PHASE_PARSE, lineno)
            block_verb, block_start = verb, lineno
            continue
        yield verb, args, comment, lineno

    if block_verb is not None:
        raise ManifestError(f"unterminated {block_verb} block", path, PHASE_PARSE, block_start)


def _single(verb: str, args: List[str], path: str, lineno: int) -> str:
    if len(args) != 1:
        raise ManifestError(f"usage: {verb} <value>", path, PHASE_PARSE, lineno)
    return args[0]


def _parse_require(verb: str, args: List[str], comment: str, path: str, lineno: int) -> Require:
    if len(args) != 2:
        raise ManifestError(f"usage: {verb} module/path v1.2.3", path, PHASE_PARSE, lineno)
    indirect = INDIRECT_MARKER in comment.replace(";", " ").split()
    return Require(path=args[0], version=args[1], indirect=indirect)


def _parse_replace(args: List[str], path: str, lineno: int) -> Replace:
    if "=>" not in args:
        raise ManifestError("replace is missing =>", path, PHASE_PARSE, lineno)
    arrow = args.index("=>")
    old, new = args[:arrow], args[arrow + 1 :]
    if len(old) not in (1, 2) or len(new) not in (1, 2):
        raise ManifestError(
            "usage: replace module/path [v1.2.3] => other/module v1.4 | local/directory",
            path,
            PHASE_PARSE,
            lineno,
        )
    local_target = is_relative_dep(new[0]) or os.path.isabs(new[0])
    if len(new) == 1 and not local_target:
        raise ManifestError(
            f"replacement module {new[0]} without version must be a directory path "
            "(rooted or starting with ./ or ../)",
            path,
            PHASE_PARSE,
            lineno,
        )
    if len(new) == 2 and local_target:
        raise ManifestError(
            f"replacement directory {new[0]} cannot have a version", path, PHASE_PARSE, lineno
        )
    return Replace(
        old_path=old[0],
        old_version=old[1] if len(old) == 2 else None,
        new_path=new[0],
        new_version=new[1] if len(new) == 2 else None,
    )


def parse_mod(path: str, text: str) -> ModFile:
    """Parse the contents of a go.mod file"""
    module = None
    fields = {"requires": [], "replaces": [], "excludes": [], "retracts": []}
    for verb, args, comment, lineno in _iter_directives(text, path, MOD_VERBS):
        if verb == "module":
            if module is not None:
                raise ManifestError("repeated module statement", path, PHASE_PARSE, lineno)
            module = _single(verb, args, path, lineno)
        elif verb in ("go", "toolchain"):
            fields[verb] = _single(verb, args, path, lineno)
        elif verb == "require":
            fields["requires"].append(_parse_require(verb, args, comment, path, lineno))
        elif verb == "exclude":
            fields["excludes"].append(_parse_require(verb, args, comment, path, lineno))
        elif verb == "replace":
            fields["replaces"].append(_parse_replace(args, path, lineno))
        elif verb == "retract":
            fields["retracts"].append(" ".join(args))
        # godebug, tool and ignore do not affect the dependency graph

    if not module:
        raise ManifestError("no module declaration", path, PHASE_PARSE)
    return ModFile(path=path, module=module, **fields)


def parse_work(path: str, text: str) -> WorkFile:
    """Parse the contents of a go.work file"""
    work = WorkFile(path=path)
    for verb, args, _, lineno in _iter_directives(text, path, WORK_VERBS):
        if verb == "use":
            work.uses.append(_single(verb, args, path, lineno))
        elif verb in ("go", "toolchain"):
            setattr(work, verb, _single(verb, args, path, lineno))
        elif verb == "replace":
            work.replaces.append(_parse_replace(args, path, lineno))
    return work


def read_work(repo_path: str) -> WorkFile:
    """Read and parse ``<repo_path>/go.work``"""
    work_path = os.path.join(repo_path, WORK_FILE)
    if not os.path.isfile(work_path):
        raise ManifestError(
            ERROR_TEMPLATES["missing_work"].format(file=WORK_FILE, root=repo_path),
            work_path,
            PHASE_READ,
        )
    try:
        with open(work_path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(
            ERROR_TEMPLATES["read_failed"].format(file=WORK_FILE, member=repo_path, error=e),
            work_path,
            PHASE_READ,
        ) from e
    work = parse_work(work_path, text)
    logger.debug(f"Parsed {work_path}: {len(work.uses)} members")
    return work


def read_mod(repo_path: str, module_path: str) -> ModFile:
    """Read and parse the go.mod of workspace member ``module_path``"""
    mod_path = os.path.join(repo_path, module_path, MOD_FILE)
    try:
        with open(mod_path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(
            ERROR_TEMPLATES["read_failed"].format(file=MOD_FILE, member=module_path, error=e),
            mod_path,
            PHASE_READ,
        ) from e
    try:
        return parse_mod(mod_path, text)
    except ManifestError as e:
        raise ManifestError(
            ERROR_TEMPLATES["parse_failed"].format(file=MOD_FILE, member=module_path, error=e.reason),
            mod_path,
            PHASE_PARSE,
            e.line,
        ) from e
