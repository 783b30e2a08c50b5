"""Tests for application settings."""

from hazardrisk.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestValidateProduction:
    def test_production_warnings(self):
        warnings = _settings(app_env="production", cors_origins="*", http_timeout=0).validate_production()

        assert len(warnings) == 3
        assert any("CORS_ORIGINS" in w for w in warnings)
        assert any("APP_DEBUG" in w for w in warnings)
        assert any("HTTP_TIMEOUT" in w for w in warnings)

    def test_clean_development_config(self):
        settings = _settings(
            app_env="development",
            cors_origins="http://localhost:5173",
            http_timeout=15.0,
        )
        assert settings.validate_production() == []

    def test_clean_production_config(self):
        settings = _settings(
            app_env="production",
            app_debug=False,
            cors_origins="https://risk.example.org",
            http_timeout=10.0,
        )
        assert settings.validate_production() == []

    def test_non_positive_timeout_warns_outside_production(self):
        warnings = _settings(app_env="development", http_timeout=-1).validate_production()
        assert len(warnings) == 1
        assert "HTTP_TIMEOUT" in warnings[0]


class TestCorsOriginList:
    def test_trims_and_drops_empty_entries(self):
        settings = _settings(cors_origins=" http://a.test , ,http://b.test,, ")
        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]

    def test_single_wildcard(self):
        assert _settings(cors_origins="*").cors_origin_list == ["*"]
