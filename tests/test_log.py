from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from shellenv import log


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(log, "_CONFIGURED_PROFILE", None)
    yield
    logger.remove()


def test_tui_profile_writes_file_only(
    fresh_logging, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    log_file = tmp_path / "shellenv.log"
    monkeypatch.setenv("SHELLENV_LOG_FILE", str(log_file))
    monkeypatch.setenv("SHELLENV_LOG_LEVEL", "info")

    log.configure_logging(profile="tui")
    logger.info("formatted {}", "x")
    logger.debug("hidden")

    content = log_file.read_text(encoding="utf-8")
    assert "formatted x" in content
    assert "hidden" not in content
    assert capsys.readouterr().err == ""


def test_same_profile_configured_once(fresh_logging, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    class RecordingLogger:
        def remove(self, *args) -> None:
            calls.append(args)

        def add(self, *args, **kwargs) -> int:
            return 0

    monkeypatch.setattr(log, "logger", RecordingLogger())

    log.configure_logging(profile="cli")
    log.configure_logging(profile="cli")
    assert len(calls) == 1

    log.configure_logging(profile="tui")
    assert len(calls) == 2
