from taskapi.settings import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("TASKS_HOST", "TASKS_PORT", "LOG_LEVEL", "CORS_ALLOW_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.log_level == "INFO"
        assert settings.cors_allow_origins == ["*"]

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TASKS_HOST", "0.0.0.0")
        monkeypatch.setenv("TASKS_PORT", "9090")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        settings = get_settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 9090
        assert settings.log_level == "DEBUG"
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]

    def test_invalid_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("TASKS_PORT", "not-a-port")
        assert get_settings().port == 8080
        monkeypatch.setenv("TASKS_PORT", "70000")
        assert get_settings().port == 8080
