from __future__ import annotations

import os
from pathlib import Path

import pytest

from shellenv import env_service
from shellenv.env_service import EnvVar
from shellenv.errors import EnvVarError


def test_get_env_vars_sorted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZZ_SHELLENV", "z")
    monkeypatch.setenv("AA_SHELLENV", "a")

    names = [ev.name for ev in env_service.get_env_vars()]
    assert names == sorted(names)
    assert EnvVar("AA_SHELLENV", "a") in env_service.get_env_vars()


def test_search_matches_name_or_value_ignoring_case(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHELLENV_EDITOR", "nvim")
    monkeypatch.setenv("SHELLENV_PAGER", "less")

    by_name = {ev.name for ev in env_service.search_env_vars("shellenv_ed")}
    by_value = {ev.name for ev in env_service.search_env_vars("NVIM")}
    assert "SHELLENV_EDITOR" in by_name and "SHELLENV_PAGER" not in by_name
    assert by_value == {"SHELLENV_EDITOR"}
    assert env_service.search_env_vars("") == []


@pytest.mark.parametrize("name", ["", "A=B", "="])
def test_validate_name_rejects(name: str) -> None:
    with pytest.raises(EnvVarError):
        env_service.validate_name(name)


def test_set_and_unset() -> None:
    env_service.set_env_var("SHELLENV_NEW", "value with spaces")
    assert os.environ["SHELLENV_NEW"] == "value with spaces"

    env_service.unset_env_var("SHELLENV_NEW")
    assert "SHELLENV_NEW" not in os.environ

    with pytest.raises(EnvVarError):
        env_service.unset_env_var("SHELLENV_NEW")


def test_display_value() -> None:
    assert env_service.display_value("a\nb") == "a\\nb"
    assert env_service.display_value("x" * 100, width=10) == "x" * 10 + "..."
    assert env_service.display_value("short", width=10) == "short"


def test_export_lines() -> None:
    assert env_service.export_line("A", "1") == 'export A="1"'
    assert env_service.build_export_lines({"A": "1", "B": "two"}) == 'export A="1"\nexport B="two"'


def test_path_entries(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", "/usr/local/bin:/usr/bin:/bin")
    assert env_service.get_path_entries() == ["/usr/local/bin", "/usr/bin", "/bin"]

    monkeypatch.setenv("PATH", "")
    assert env_service.get_path_entries() == []

    monkeypatch.delenv("PATH")
    assert env_service.get_path_entries() == []


def test_remove_path_entry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", "/a:/b:/c")

    assert env_service.remove_path_entry(1) == "/b"
    assert os.environ["PATH"] == "/a:/c"
    with pytest.raises(EnvVarError):
        env_service.remove_path_entry(5)


def test_move_path_entry_clamps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATH", "/a:/b:/c")

    assert env_service.move_path_entry(0, -1) == 0
    assert os.environ["PATH"] == "/a:/b:/c"

    assert env_service.move_path_entry(0, 1) == 1
    assert os.environ["PATH"] == "/b:/a:/c"

    assert env_service.move_path_entry(1, 5) == 2
    assert os.environ["PATH"] == "/b:/c:/a"


def test_duplicate_and_missing_entries(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    real = tmp_path / "bin"
    real.mkdir()
    monkeypatch.setenv("PATH", f"{real}:/nonexistent/shellenv:{real}:{real}")

    assert env_service.duplicate_path_entries() == [str(real)]
    assert env_service.missing_path_entries() == ["/nonexistent/shellenv"]


def test_shell_config_candidates(home: Path) -> None:
    candidates = env_service.shell_config_candidates()
    assert candidates == {"bash": home / ".bashrc", "zsh": home / ".zshrc"}


def test_determine_shell_config(monkeypatch: pytest.MonkeyPatch, home: Path) -> None:
    monkeypatch.setenv("SHELL", "/bin/zsh")
    assert env_service.determine_shell_config() == home / ".zshrc"

    monkeypatch.setenv("SHELL", "/bin/bash")
    monkeypatch.setattr(env_service.shutil, "which", lambda name: None)
    assert env_service.determine_shell_config() == home / ".bashrc"
