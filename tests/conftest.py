from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_environ(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """每个用例使用独立的环境变量副本和临时 HOME。"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(os, "environ", dict(os.environ))
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("SHELLENV_SETTINGS", str(home / ".shellenv.toml"))
    return home


@pytest.fixture
def home(_isolated_environ: Path) -> Path:
    return _isolated_environ


@pytest.fixture
def write_rc(tmp_path: Path):
    def _write(text: str, name: str = ".bashrc") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
