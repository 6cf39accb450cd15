from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/finder/cli.py",
        "src/finder/config.py",
        "src/finder/output.py",
        "src/finder/matching/__init__.py",
        "src/finder/policy/__init__.py",
        "src/finder/search/__init__.py",
        "src/finder/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
