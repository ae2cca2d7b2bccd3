"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging

from manda.config import (
    FeedSettings,
    LoggingSettings,
    Settings,
    configure_logging,
    load_settings,
)


class TestDefaults:
    def test_sections(self):
        settings = Settings()
        assert settings.responder.provider == "knowledge_base"
        assert settings.responder.reply_delay == 0.5
        assert settings.benchmarks.data_source == "Industry Association Data"
        assert settings.benchmarks.confidence_score == 85

    def test_feed_defaults(self):
        feed = FeedSettings()
        assert feed.transport == "mock"
        assert feed.poll_interval == 15.0
        assert feed.handshake_timeout == 5.0
        assert feed.max_reconnect_attempts == 5

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"


class TestLoadSettings:
    def test_no_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MANDA_PROFILE", raising=False)
        assert load_settings() == Settings()

    def test_yaml_overrides(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text(
            "responder:\n  provider: site_faq\nfeed:\n  poll_interval: 2.5\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MANDA_PROFILE", raising=False)

        settings = load_settings()
        assert settings.responder.provider == "site_faq"
        assert settings.feed.poll_interval == 2.5
        assert settings.feed.transport == "mock"

    def test_found_in_parent_directory(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("benchmarks:\n  seed: 7\n", encoding="utf-8")
        child = tmp_path / "nested"
        child.mkdir()
        monkeypatch.chdir(child)
        monkeypatch.delenv("MANDA_PROFILE", raising=False)
        assert load_settings().benchmarks.seed == 7

    def test_profile_file_preferred(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("benchmarks:\n  seed: 1\n", encoding="utf-8")
        (tmp_path / "settings-ci.yaml").write_text("benchmarks:\n  seed: 2\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MANDA_PROFILE", "ci")
        assert load_settings().benchmarks.seed == 2

    def test_empty_file(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MANDA_PROFILE", raising=False)
        assert load_settings() == Settings()


class TestConfigureLogging:
    def test_quiets_http_loggers(self):
        configure_logging(LoggingSettings(level="DEBUG"))
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("websockets").level == logging.WARNING
