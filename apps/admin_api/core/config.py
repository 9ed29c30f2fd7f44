from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Empty means the bundled SQLite file under admin_data/
    DATABASE_URL: str = ""

    # Soft admin auth: when empty every request is treated as the demo admin
    ADMIN_API_TOKEN: str = ""

    # Comma-separated list of allowed frontend origins
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Create missing tables / columns on startup
    AUTO_MIGRATE: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
