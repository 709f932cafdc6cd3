"""Shared fixtures for pathmix tests."""

import importlib.util
import textwrap
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture()
def write_module(tmp_path: Path):
    """Fixture that writes a module under tmp_path and imports it from that file."""
    counter = {"n": 0}

    def _write(rel_path: str, code: str) -> ModuleType:
        target = tmp_path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(code))
        counter["n"] += 1
        spec = importlib.util.spec_from_file_location(
            f"_pathmix_written_{counter['n']}", str(target)
        )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _write


@pytest.fixture()
def fake_home(monkeypatch, tmp_path: Path) -> str:
    """Point the OS home directory lookup at a directory under tmp_path."""
    home = tmp_path / "home" / "tester"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return str(home)
