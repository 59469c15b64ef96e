from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "postgresql://jawlog:jawlog@db:5432/jawlog"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://myapp.com,https://api.myapp.com"
    CORS_ORIGINS: str = "*"

    # Max records returned by history / trends / insights queries.
    HISTORY_LIMIT: int = 30

    # Product banner shown after a high-stress, high-pain log.
    RECOMMENDATION_MIN_LOGS: int = 5
    RECOMMENDATION_MIN_STRESS: int = 4
    RECOMMENDATION_MIN_PAIN: int = 5
    PRODUCT_URL: str = "https://jawhealthhub.com/products/tmj-comfortplus"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
