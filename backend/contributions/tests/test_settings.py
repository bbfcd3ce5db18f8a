"""
Test: Settings from environment
"""

from contributions.config import Settings, ThreadStrategy, get_settings


class TestSettings:

    def test_defaults(self, settings):
        assert settings.environment == "development"
        assert settings.session_id_size == 10
        assert settings.thread_strategy == ThreadStrategy.SCAN
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CONTRIBUTIONS_SESSION_ID_SIZE", "16")
        monkeypatch.setenv("CONTRIBUTIONS_THREAD_STRATEGY", "INDEX")
        monkeypatch.setenv("CONTRIBUTIONS_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.session_id_size == 16
        assert settings.thread_strategy == ThreadStrategy.INDEX
        assert settings.log_level == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("SESSION_ID_SIZE", "32")
        assert Settings(_env_file=None).session_id_size == 10

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
