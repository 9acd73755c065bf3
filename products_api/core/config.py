
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Products API", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    app_port: int = Field(default=3000, alias="APP_PORT")
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # CORS (the API is public; "*" mirrors a bare cors() setup)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    # Embedded SQLite by default
    database_url: str = Field(
        default="sqlite+aiosqlite:///./database.sqlite",
        alias="DATABASE_URL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
