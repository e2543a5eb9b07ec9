"""Regenerate the checked-in quantity modules from ``definitions/``."""
from __future__ import annotations

import sys
from pathlib import Path

from unitkit.generator.cli import main

ROOT = Path(__file__).resolve().parents[1]


def run(argv: list[str]) -> int:
    defaults = ["--definitions", str(ROOT / "definitions"), "--output", str(ROOT / "src" / "unitkit")]
    return main([*defaults, *argv])


if __name__ == "__main__":
    sys.exit(run(sys.argv[1:]))
