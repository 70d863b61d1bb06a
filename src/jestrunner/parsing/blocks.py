"""Block tree extraction for jest test files.

A block is one ``describe``/``test``/``it`` call. Blocks nest the way the
calls nest in source, under a synthetic root block owning the top-level
calls. Lines are 1-based and inclusive.

Recognised call shapes::

    describe("group", fn)             it.only("case", fn)
    xdescribe / fdescribe / xit ...   test.concurrent.skip("case", fn)
    describe.each([...])("%s", fn)    test.each`table`("$a + $b", fn)
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from jestrunner.core.logging import get_logger
from jestrunner.parsing.treesitter import ParseResult, TreeSitterParser

log = get_logger("parsing.blocks")

BlockKind = Literal["root", "describe", "test", "it"]

# Test function name -> block kind
TEST_FUNCTIONS: dict[str, BlockKind] = {
    "describe": "describe",
    "fdescribe": "describe",
    "xdescribe": "describe",
    "test": "test",
    "xtest": "test",
    "it": "it",
    "fit": "it",
    "xit": "it",
}

MODIFIERS = frozenset({"only", "skip", "concurrent", "failing", "todo"})

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

# Backslash followed by a line terminator continues the string
_LINE_CONTINUATIONS = ("\r\n", "\n", "\r", "\u2028", "\u2029")


@dataclass
class Block:
    """A test or test-group declaration with its line range."""

    name: str
    kind: BlockKind
    start_line: int
    end_line: int
    children: list[Block] = field(default_factory=list)

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    def walk(self) -> list[Block]:
        """All descendant blocks in source order (pre-order)."""
        result: list[Block] = []
        for child in self.children:
            result.append(child)
            result.extend(child.walk())
        return result


@dataclass
class TestFile:
    """Parsed block tree of one test file."""

    path: Path
    language: str | None
    root: Block
    error_count: int = 0

    @property
    def blocks(self) -> list[Block]:
        """Top-level blocks."""
        return self.root.children


def _root_block(end_line: int = 0) -> Block:
    return Block(name="", kind="root", start_line=1, end_line=end_line)


def _text(node: Any, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _callee_kind(node: Any, source: bytes) -> BlockKind | None:
    """Resolve the block kind of a call's ``function`` node, if it is a test call."""
    if node.type == "identifier":
        return TEST_FUNCTIONS.get(_text(node, source))

    if node.type == "member_expression":
        prop = node.child_by_field_name("property")
        obj = node.child_by_field_name("object")
        if prop is None or obj is None or _text(prop, source) not in MODIFIERS:
            return None
        return _callee_kind(obj, source)

    # describe.each(table)(name, fn) and test.each`table`(name, fn)
    if node.type == "call_expression":
        inner = node.child_by_field_name("function")
        if inner is None or inner.type != "member_expression":
            return None
        prop = inner.child_by_field_name("property")
        obj = inner.child_by_field_name("object")
        if prop is None or obj is None or _text(prop, source) != "each":
            return None
        return _callee_kind(obj, source)

    return None


def _decode_escape(raw: str) -> str:
    """Decode one JS escape sequence given without its leading backslash."""
    if raw in _LINE_CONTINUATIONS:
        return ""
    if raw in _ESCAPES:
        return _ESCAPES[raw]
    if raw.startswith("u{") and raw.endswith("}"):
        return chr(int(raw[2:-1], 16))
    if raw[:1] in ("x", "u") and len(raw) > 1 and all(c in string.hexdigits for c in raw[1:]):
        return chr(int(raw[1:], 16))
    if raw.isdigit() and all(c in "01234567" for c in raw):
        return chr(int(raw, 8))
    return raw


def _string_value(node: Any, source: bytes) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "escape_sequence":
            parts.append(_decode_escape(_text(child, source)[1:]))
        else:
            parts.append(_text(child, source))
    # \uD83D\uDE00 style pairs arrive as two lone surrogates
    return "".join(parts).encode("utf-16", "surrogatepass").decode("utf-16")


def _block_name(call: Any, source: bytes) -> str | None:
    """Name of a test call: the text of its first argument."""
    args = call.child_by_field_name("arguments")
    if args is None or args.type != "arguments":
        return None
    first = next((c for c in args.named_children if c.type != "comment"), None)
    if first is None:
        return None
    if first.type == "string":
        return _string_value(first, source)
    if first.type == "template_string":
        return _text(first, source)[1:-1]
    return _text(first, source)


def _collect(node: Any, parent: Block, source: bytes) -> None:
    for child in node.children:
        if child.type == "call_expression":
            func = child.child_by_field_name("function")
            kind = _callee_kind(func, source) if func is not None else None
            name = _block_name(child, source) if kind else None
            if kind and name is not None:
                block = Block(
                    name=name,
                    kind=kind,
                    start_line=child.start_point[0] + 1,
                    end_line=child.end_point[0] + 1,
                )
                parent.children.append(block)
                _collect(child, block, source)
                continue
        _collect(child, parent, source)


def extract_blocks(result: ParseResult, source: bytes) -> Block:
    """Build the block tree from a tree-sitter parse result."""
    root = _root_block(result.root_node.end_point[0] + 1)
    _collect(result.root_node, root, source)
    return root


def parse_test_file(
    path: Path,
    content: str | bytes | None = None,
    *,
    parser: TreeSitterParser | None = None,
) -> TestFile:
    """Parse a test file into its block tree.

    Never raises for bad input: unsupported extensions and missing grammars
    yield an empty tree, syntax errors a partial one.

    Args:
        path: Test file path (extension selects the grammar)
        content: Source text. If None, reads from path.
        parser: Reusable parser instance

    Raises:
        OSError: If content is None and the file cannot be read.
    """
    source = content.encode() if isinstance(content, str) else content
    if source is None:
        source = path.read_bytes()

    parser = parser or TreeSitterParser()
    try:
        result = parser.parse(path, source)
    except ValueError as e:
        log.warning("parse_skipped", path=str(path), reason=str(e))
        return TestFile(path=path, language=None, root=_root_block())

    root = extract_blocks(result, source)
    if result.error_count:
        log.debug("parse_errors", path=str(path), error_count=result.error_count)
    log.debug("blocks_extracted", path=str(path), count=len(root.walk()))
    return TestFile(
        path=path,
        language=result.language,
        root=root,
        error_count=result.error_count,
    )
