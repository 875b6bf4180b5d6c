"""Tests for keystride.app – logging setup and wiring of the entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from keystride import app as app_module
from keystride.core.session import Screen
from keystride.core.settings import Settings, SettingsStore


class RecordingApp:
    """Stands in for TypingApp and records how it was built."""

    launched: list = []

    def __init__(self, session, names, tick_interval: float = 0.1) -> None:
        self.session = session
        self.names = names
        self.tick_interval = tick_interval

    def run(self) -> None:
        RecordingApp.launched.append(self)


class TestConfigureLogging:
    def test_logs_to_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        log_file = tmp_path / "logs" / "keystride.log"
        app_module.configure_logging(Settings(log_level="DEBUG", log_file=str(log_file)))
        assert log_file.parent.is_dir()
        assert calls == [
            {
                "level": logging.DEBUG,
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "filename": str(log_file),
            }
        ]


class TestRun:
    def test_wires_session_into_app(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        settings = Settings(tick_interval=0.25, default_category="rust", log_file=str(tmp_path / "k.log"))
        monkeypatch.setattr(SettingsStore, "load", lambda self: settings)
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        monkeypatch.setattr(RecordingApp, "launched", [])
        monkeypatch.setattr(app_module, "TypingApp", RecordingApp)

        app_module.run()

        assert len(RecordingApp.launched) == 1
        window = RecordingApp.launched[0]
        assert window.session.screen is Screen.MENU
        assert window.session.categories == ("english", "rust", "python")
        assert window.session.selected_index == 1
        assert window.names == {"english": "English", "rust": "Rust", "python": "Python"}
        assert window.tick_interval == 0.25
