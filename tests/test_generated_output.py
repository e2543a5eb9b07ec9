from __future__ import annotations

from pathlib import Path

from unitkit.generator import generate, stale_files
from unitkit.schema import discover_definitions

ROOT = Path(__file__).resolve().parents[1]


def test_checked_in_modules_match_definitions() -> None:
    result = generate(discover_definitions(ROOT / "definitions"), fallback_culture="en-US")

    assert result.ok, [str(error) for error in result.errors]
    assert stale_files(result, ROOT / "src" / "unitkit") == []
