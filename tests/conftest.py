"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of jestrunner modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("jestrunner"):
        del sys.modules[module_name]


SUM_TEST_JS = """\
import { sum } from "./sum";

describe("sum", () => {
  it("adds numbers", () => {
    expect(sum(1, 2)).toBe(3);
  });

  it.each([[1, 1, 2]])("adds %i + %i", (a, b, expected) => {
    expect(sum(a, b)).toBe(expected);
  });
});

test("standalone", () => {});
"""


@pytest.fixture
def sum_test_js() -> str:
    """A small jest test file.

    Blocks: describe "sum" 3-11 > it "adds numbers" 4-6, it.each "adds %i + %i"
    8-10; test "standalone" 13-13.
    """
    return SUM_TEST_JS


@pytest.fixture
def workspace(tmp_path: Path, sum_test_js: str) -> Path:
    """Workspace root with a .git marker and src/sum.test.js."""
    root = tmp_path / "ws"
    (root / ".git").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "src" / "sum.test.js").write_text(sum_test_js)
    return root


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's global config and JESTRUNNER__ env vars out of tests."""
    monkeypatch.setattr(
        "jestrunner.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global-config.yaml"
    )
    for key in list(os.environ):
        if key.upper().startswith("JESTRUNNER__"):
            monkeypatch.delenv(key)
