from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from unitkit.generator.cli import main

ROOT = Path(__file__).resolve().parents[1]
DEFINITIONS = ROOT / "definitions"
PACKAGE = ROOT / "src" / "unitkit"


def _copy_definitions(tmp_path: Path, *names: str) -> Path:
    target = tmp_path / "definitions"
    target.mkdir()
    for name in names:
        shutil.copy(DEFINITIONS / name, target / name)
    return target


def _snapshot(directory: Path) -> dict[str, str]:
    return {
        str(path.relative_to(directory)): path.read_text(encoding="utf-8")
        for path in sorted(directory.rglob("*.py"))
    }


def test_cli_writes_and_checks(tmp_path: Path) -> None:
    definitions = _copy_definitions(tmp_path, "length.yaml", "mass.yaml")
    output = tmp_path / "out"

    assert main(["--definitions", str(definitions), "--output", str(output)]) == 0
    assert (output / "quantities" / "length.py").exists()
    assert (output / "quantities" / "mass.py").exists()
    assert main(["--definitions", str(definitions), "--output", str(output), "--check"]) == 0

    (output / "quantities" / "mass.py").write_text("", encoding="utf-8")
    assert main(["--definitions", str(definitions), "--output", str(output), "--check"]) == 1


def test_cli_reports_rejected_families_without_writing(tmp_path: Path) -> None:
    definitions = _copy_definitions(tmp_path, "length.yaml")
    (definitions / "broken.yaml").write_text("name: Broken\nbaseUnit: Nothing\nunits: []\n", encoding="utf-8")
    output = tmp_path / "out"

    assert main(["--definitions", str(definitions), "--output", str(output), "-v"]) == 1
    assert not output.exists()
    assert main(["--definitions", str(definitions), "--output", str(output), "--check"]) == 1


def test_rejected_family_leaves_package_importable(tmp_path: Path) -> None:
    package = tmp_path / "site" / "unitkit"
    shutil.copytree(PACKAGE, package, ignore=shutil.ignore_patterns("__pycache__"))
    definitions = _copy_definitions(tmp_path, *(path.name for path in DEFINITIONS.glob("*.yaml")))
    length = definitions / "length.yaml"
    length.write_text(
        length.read_text(encoding="utf-8").replace("baseUnit: Meter", "baseUnit: Metre"),
        encoding="utf-8",
    )
    before = _snapshot(package)

    assert main(["--definitions", str(definitions), "--output", str(package)]) == 1
    assert _snapshot(package) == before

    env = {**os.environ, "PYTHONPATH": str(package.parent)}
    completed = subprocess.run(
        [sys.executable, "-c", "import unitkit; print(unitkit.Length.from_meters(2).to_string(culture='en-US'))"],
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.strip() == "2 m"


def test_cli_missing_definitions_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        main(["--definitions", str(tmp_path / "missing"), "--output", str(tmp_path)])
