"""
Tests for settings loaded from the environment and .env files
"""

import logging

import pytest

from connector_guide.config import Settings, configure_logging, load_settings
from connector_guide.errors import ConfigurationError

ENV_VARS = [
    "SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_URL",
    "SUPABASE_KEY",
    "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "CONNECTOR_CATALOG_CSV",
    "TERMINAL_CATALOG_CSV",
    "CONNECTOR_GUIDE_LANGUAGE",
    "CONNECTOR_GUIDE_LOG_LEVEL",
    "CONNECTOR_GUIDE_QUERY_TIMEOUT",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset all settings variables; anything set during the test is undone."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def no_env_file(tmp_path):
    return str(tmp_path / "missing.env")


class TestLoadSettings:

    def test_defaults(self, clean_env, no_env_file):
        settings = load_settings(no_env_file)

        assert settings == Settings()
        assert settings.has_supabase is False
        assert settings.default_language == "en"
        assert settings.log_level == "INFO"
        assert settings.query_timeout_seconds is None

    def test_supabase_credentials(self, clean_env, no_env_file):
        clean_env.setenv("SUPABASE_URL", "https://example.supabase.co")
        clean_env.setenv("SUPABASE_KEY", "anon-key")

        settings = load_settings(no_env_file)

        assert settings.has_supabase is True
        assert settings.supabase_url == "https://example.supabase.co"

    def test_public_variable_names_are_accepted(self, clean_env, no_env_file):
        clean_env.setenv("NEXT_PUBLIC_SUPABASE_URL", "https://example.supabase.co")
        clean_env.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon-key")
        assert load_settings(no_env_file).has_supabase is True

    def test_url_without_key_is_not_supabase(self, clean_env, no_env_file):
        clean_env.setenv("SUPABASE_URL", "https://example.supabase.co")
        assert load_settings(no_env_file).has_supabase is False

    def test_log_level_is_upper_cased(self, clean_env, no_env_file):
        clean_env.setenv("CONNECTOR_GUIDE_LOG_LEVEL", "debug")
        assert load_settings(no_env_file).log_level == "DEBUG"

    def test_timeout(self, clean_env, no_env_file):
        clean_env.setenv("CONNECTOR_GUIDE_QUERY_TIMEOUT", "2.5")
        assert load_settings(no_env_file).query_timeout_seconds == 2.5

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_invalid_timeout_raises(self, clean_env, no_env_file, raw):
        clean_env.setenv("CONNECTOR_GUIDE_QUERY_TIMEOUT", raw)
        with pytest.raises(ConfigurationError):
            load_settings(no_env_file)

    def test_env_file_is_read(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CONNECTOR_CATALOG_CSV=catalog.csv\nCONNECTOR_GUIDE_LANGUAGE=de\n", encoding="utf-8")

        settings = load_settings(str(env_file))

        assert settings.catalog_csv == "catalog.csv"
        assert settings.default_language == "de"

    def test_environment_wins_over_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("CONNECTOR_GUIDE_LANGUAGE=de\n", encoding="utf-8")
        clean_env.setenv("CONNECTOR_GUIDE_LANGUAGE", "en")

        assert load_settings(str(env_file)).default_language == "en"


def test_configure_logging_accepts_level_names():
    configure_logging("warning")
    configure_logging("not-a-level")
    assert logging.getLogger("connector_guide").getEffectiveLevel() <= logging.CRITICAL
