"""Tests for METRICCONV_ environment configuration."""

from metricconv.config import (
    MetricConverterConfig,
    get_config,
    reset_config,
    set_config,
)


class TestFromEnv:

    def test_defaults(self):
        config = MetricConverterConfig.from_env()

        assert config.quit_token == "q"
        assert config.prompt == "> "
        assert config.show_instructions is True
        assert config.log_level == ""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("METRICCONV_QUIT_TOKEN", "exit")
        monkeypatch.setenv("METRICCONV_PROMPT", "? ")
        monkeypatch.setenv("METRICCONV_SHOW_INSTRUCTIONS", "no")
        monkeypatch.setenv("METRICCONV_LOG_LEVEL", "debug")

        config = MetricConverterConfig.from_env()

        assert config.quit_token == "exit"
        assert config.prompt == "? "
        assert config.show_instructions is False
        assert config.log_level == "DEBUG"

    def test_invalid_quit_token_falls_back(self, monkeypatch):
        monkeypatch.setenv("METRICCONV_QUIT_TOKEN", "   ")
        assert MetricConverterConfig.from_env().quit_token == "q"

        monkeypatch.setenv("METRICCONV_QUIT_TOKEN", "1 kg")
        assert MetricConverterConfig.from_env().quit_token == "q"

    def test_invalid_log_level_is_ignored(self, monkeypatch):
        monkeypatch.setenv("METRICCONV_LOG_LEVEL", "LOUD")
        assert MetricConverterConfig.from_env().log_level == ""


class TestSingleton:

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_and_reset(self):
        custom = MetricConverterConfig(quit_token="exit")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() is not custom
        assert get_config().quit_token == "q"
