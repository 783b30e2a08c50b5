from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_env: str = "development"
    app_debug: bool = True
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    # CORS: allowed origins (comma-separated, or "*" for dev only)
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # US Census Bureau geocoder (ZIP -> county)
    census_geocoder_url: str = "https://geocoding.geo.census.gov"
    census_benchmark: str = "Public_AR_Current"
    census_vintage: str = "Current_Current"

    # OpenFEMA (National Risk Index county data)
    openfema_url: str = "https://www.fema.gov"

    # Per-call timeout for both upstream services, in seconds
    http_timeout: float = 15.0

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def validate_production(self) -> list[str]:
        """Check critical env vars for production. Returns list of warnings."""
        warnings = []
        if self.app_env == "production":
            if "*" in self.cors_origin_list:
                warnings.append("CORS_ORIGINS should not contain '*' in production")
            if self.app_debug:
                warnings.append("APP_DEBUG should be disabled in production")
        if self.http_timeout <= 0:
            warnings.append("HTTP_TIMEOUT must be positive; upstream calls could block indefinitely")
        return warnings


settings = Settings()
