import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'excerpter'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from excerpter.core.stdlib_logging import reset_stdlib_logging_for_tests
from excerpter.data import clear_caches


@pytest.fixture(autouse=True)
def _isolate_excerpter_state(monkeypatch: pytest.MonkeyPatch):
    """Each test starts without a config overlay, cached data, or log handler."""
    monkeypatch.delenv("EXCERPTER_CONFIG", raising=False)
    clear_caches()
    yield
    reset_stdlib_logging_for_tests()
    clear_caches()


@pytest.fixture
def write_source(tmp_path: Path):
    """Write text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "sample.dart") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# Multi-region sample: imports, main, and main-stub (main without its body).
DART_SAMPLE = (
    "// #docregion imports\n"
    "import 'dart:async';\n"
    "// #enddocregion imports\n"
    "\n"
    "// #docregion main, main-stub\n"
    "void main() async {\n"
    "  // #enddocregion main-stub\n"
    "  print('Compute π using the Monte Carlo method.');\n"
    "  await for (var estimate in computePi().take(500)) {\n"
    "    print('π ≅ $estimate');\n"
    "  }\n"
    "  // #docregion main-stub\n"
    "}\n"
    "// #enddocregion main, main-stub\n"
    "\n"
    "/// Generates a stream of increasingly accurate estimates of π.\n"
    "Stream<double> computePi({int batch: 100000}) async* {\n"
    "  // ...\n"
    "}\n"
)


@pytest.fixture
def dart_sample() -> str:
    return DART_SAMPLE
