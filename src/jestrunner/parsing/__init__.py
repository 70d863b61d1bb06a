"""Tree-sitter parsing of jest test files into block trees."""

from jestrunner.parsing.blocks import Block, TestFile, extract_blocks, parse_test_file
from jestrunner.parsing.treesitter import ParseResult, TreeSitterParser

__all__ = [
    "Block",
    "TestFile",
    "extract_blocks",
    "parse_test_file",
    "ParseResult",
    "TreeSitterParser",
]
