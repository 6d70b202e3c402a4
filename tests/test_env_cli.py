from __future__ import annotations

from pathlib import Path

import pytest

import env_cli

RC_TEXT = "alias ll='ls -la'\nexport B=2\n# hi\nexport A=1\n"


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(env_cli, "configure_logging", lambda **_: None)


def test_list_prints_variables(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("SHELLENV_CLI_VAR", "hello\nworld")

    assert env_cli.main(["list"]) == 0
    out = capsys.readouterr().out
    assert "SHELLENV_CLI_VAR" in out
    assert "hello\\nworld" in out


def test_search(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("SHELLENV_CLI_VAR", "needle")

    assert env_cli.main(["search", "NEEDLE"]) == 0
    assert "SHELLENV_CLI_VAR" in capsys.readouterr().out

    assert env_cli.main(["search", "no-such-value-anywhere-42"]) == 0
    assert "未找到" in capsys.readouterr().out


def test_path_check(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("PATH", "/nonexistent/a:/nonexistent/a")

    assert env_cli.main(["path", "--check"]) == 0
    out = capsys.readouterr().out
    assert "  1. /nonexistent/a" in out
    assert "[重复] /nonexistent/a" in out
    assert "[不存在] /nonexistent/a" in out


def test_export(capsys: pytest.CaptureFixture[str]) -> None:
    assert env_cli.main(["export", "MY_VAR", "a b"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == 'export MY_VAR="a b"'


def test_export_invalid_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert env_cli.main(["export", "A=B", "x"]) == 1
    assert "[Error]" in capsys.readouterr().err


def test_format_preview_does_not_write(write_rc, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_rc(RC_TEXT)

    assert env_cli.main(["format", str(path)]) == 0
    out = capsys.readouterr().out
    assert "预览 (bash)" in out
    assert "# Exports\nexport A=1\nexport B=2" in out
    assert "\x1b[" not in out
    assert path.read_text(encoding="utf-8") == RC_TEXT


def test_format_write_and_backup(write_rc, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_rc(RC_TEXT, name=".zshrc")

    assert env_cli.main(["format", str(path), "--write", "--backup"]) == 0
    out = capsys.readouterr().out
    assert "已格式化" in out
    assert "备份文件" in out
    assert path.read_text(encoding="utf-8").startswith("# Comments\n# hi\n\n# Exports\nexport A=1")
    assert len(list(path.parent.glob(".zshrc.bak.*"))) == 1


def test_format_bashrc_flag_uses_home(home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (home / ".bashrc").write_text("export X=1\n", encoding="utf-8")

    assert env_cli.main(["format", "--bashrc", "--write"]) == 0
    assert (home / ".bashrc").read_text(encoding="utf-8") == "# Comments\n# Exports\nexport X=1\n# Aliases\n# Functions"


def test_format_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "does-not-exist.bashrc"

    assert env_cli.main(["format", str(missing), "--write"]) == 1
    assert "[Error]" in capsys.readouterr().err
    assert not missing.exists()


def test_format_refuses_multiline_functions(write_rc, capsys: pytest.CaptureFixture[str]) -> None:
    text = "greet() {\n  echo hi\n}\n"
    path = write_rc(text)

    assert env_cli.main(["format", str(path), "--write"]) == 1
    assert "函数体跨多行" in capsys.readouterr().err
    assert path.read_text(encoding="utf-8") == text

    assert env_cli.main(["format", str(path), "--write", "--force"]) == 0
    assert path.read_text(encoding="utf-8") != text


def test_format_preview_truncates(write_rc, home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (home / ".shellenv.toml").write_text("preview_limit = 20\n", encoding="utf-8")
    path = write_rc(RC_TEXT)

    env_cli.main(["format", str(path)])
    out = capsys.readouterr().out
    assert "\n...\n" in out
    assert "export B=2" not in out

    env_cli.main(["format", str(path), "--full"])
    assert "export B=2" in capsys.readouterr().out


def test_env_file_is_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SHELLENV_FROM_DOTENV=yes\n", encoding="utf-8")

    assert env_cli.main(["--env-file", str(env_file), "search", "SHELLENV_FROM_DOTENV"]) == 0
    assert "SHELLENV_FROM_DOTENV" in capsys.readouterr().out


def test_format_preview_of_latin1_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / ".bashrc"
    raw = b"# caf\xe9\nexport A=1\n"
    path.write_bytes(raw)

    assert env_cli.main(["format", str(path)]) == 0
    assert "# caf�" in capsys.readouterr().out
    assert path.read_bytes() == raw
