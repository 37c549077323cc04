"""
Run the telepath test suite, installing ``.[dev]`` (pytest, plus numpy for
the simulation CLI) in editable mode the first time.

    python tests.py               # whole suite
    python tests.py -k coop -q    # extra arguments go straight to pytest
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent


def ensure_test_dependencies() -> None:
    try:
        import numpy  # noqa: F401
        import pytest  # noqa: F401
        import telepath  # noqa: F401
        return
    except ImportError:
        pass

    print("Installing telepath-core with its dev extra ...")
    subprocess.check_call(
        [sys.executable, "-m", "pip", "install", "-e", ".[dev]"],
        cwd=str(ROOT),
    )


def main(argv: list[str] | None = None) -> int:
    ensure_test_dependencies()
    args = sys.argv[1:] if argv is None else argv
    return subprocess.call([sys.executable, "-m", "pytest", "tests", *args], cwd=str(ROOT))


if __name__ == "__main__":
    sys.exit(main())
