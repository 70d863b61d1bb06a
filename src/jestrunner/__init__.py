"""jestrunner - run or debug the jest test under the cursor."""

from jestrunner.parsing import Block, parse_test_file
from jestrunner.testing import ActiveEditor, JestRunner, find_full_test_name

__all__ = [
    "ActiveEditor",
    "Block",
    "JestRunner",
    "find_full_test_name",
    "parse_test_file",
]
