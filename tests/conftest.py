"""Shared fixtures: fabricated application folders and environments."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _write_entry(folder: Path, stem: str, body: Optional[str] = None, **keys) -> Path:
    folder.mkdir(parents=True, exist_ok=True)
    if body is None:
        fields = {"Type": "Application", "Name": stem, "Exec": stem}
        fields.update(keys)
        lines = ["[Desktop Entry]"] + [f"{k}={v}" for k, v in fields.items() if v is not None]
        body = "\n".join(lines) + "\n"
    path = folder / f"{stem}.desktop"
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def write_entry():
    return _write_entry


@pytest.fixture
def xdg_env(tmp_path):
    """Environment with one user folder and two system folders under tmp_path."""
    env = {
        "XDG_DATA_HOME": str(tmp_path / "home"),
        "XDG_DATA_DIRS": f"{tmp_path / 'sys1'}:{tmp_path / 'sys2'}",
        "PATH": str(tmp_path / "bin"),
    }
    return env
