"""Tree-sitter parsing for test files.

Grammars are loaded lazily from the installed ``tree_sitter_*`` wheels and
cached per parser instance. Tree-sitter is error tolerant: malformed source
still yields a tree, with ERROR/MISSING nodes counted in ``error_count``.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tree_sitter

from jestrunner.parsing.packs import LanguagePack, get_pack_for_ext


@dataclass
class ParseResult:
    """Result of parsing a file."""

    language: str
    error_count: int
    root_node: Any  # Tree-sitter Node


@dataclass
class TreeSitterParser:
    """
    Tree-sitter parser for JavaScript and TypeScript test files.

    Usage::

        parser = TreeSitterParser()
        result = parser.parse(Path("src/sum.test.ts"), content)
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._parser = tree_sitter.Parser()
        self._languages = {}

    def _get_language(self, pack: LanguagePack) -> Any:
        """Get or load the tree-sitter language for a pack."""
        if pack.grammar_name in self._languages:
            return self._languages[pack.grammar_name]

        try:
            mod = importlib.import_module(pack.grammar_module)
            lang_fn = getattr(mod, pack.language_func or "language")
        except (ImportError, AttributeError) as err:
            raise ValueError(
                f"Language not available: {pack.grammar_name} (install {pack.grammar_package})"
            ) from err

        lang = tree_sitter.Language(lang_fn())
        self._languages[pack.grammar_name] = lang
        return lang

    def parse(self, path: Path, content: bytes | None = None) -> ParseResult:
        """
        Parse a file with Tree-sitter.

        Args:
            path: Path to file (used for language detection)
            content: File content as bytes. If None, reads from path.

        Returns:
            ParseResult with tree, language, and error info.

        Raises:
            ValueError: If the extension is unsupported or its grammar is missing.
        """
        ext = path.suffix.lower().lstrip(".")
        pack = get_pack_for_ext(ext)
        if pack is None:
            raise ValueError(f"Unsupported file extension: {ext}")

        if content is None:
            content = path.read_bytes()

        self._parser.language = self._get_language(pack)
        tree = self._parser.parse(content)

        error_count = 0

        def count_errors(node: Any) -> None:
            nonlocal error_count
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            for child in node.children:
                count_errors(child)

        count_errors(tree.root_node)

        return ParseResult(
            language=pack.name,
            error_count=error_count,
            root_node=tree.root_node,
        )
