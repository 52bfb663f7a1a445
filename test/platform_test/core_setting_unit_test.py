import pytest

from src.platform.config.core_setting import Settings


@pytest.mark.unit
class TestCorsOriginsSetting:
    def test_comma_separated_env_value(self, monkeypatch: pytest.MonkeyPatch):
        """
        Given: BACKEND_CORS_ORIGINS set as a comma-separated string
        When: Settings are loaded
        Then: Each origin becomes one list entry
        """
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://localhost:3000, http://example.com')

        settings = Settings()

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000', 'http://example.com']

    def test_single_origin_env_value(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://localhost:3000')

        assert Settings().BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    def test_json_list_env_value(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["http://a.test", "http://b.test"]')

        assert Settings().BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']

    def test_shipped_env_example_loads(self, monkeypatch: pytest.MonkeyPatch):
        """
        Given: No override, so the .env.example value applies when .env is absent
        When: Settings are loaded
        Then: Loading succeeds with a plain list of origins
        """
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

        settings = Settings()

        assert all(isinstance(origin, str) for origin in settings.BACKEND_CORS_ORIGINS)
        assert settings.BACKEND_CORS_ORIGINS
