
from pydantic import Field
from pydantic_settings import BaseSettings

# Largest page any list query may return
MAX_PAGE_SIZE = 50

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Reddit API"
    app_env: str = "development"
    app_port: int = 8000

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./reddit_dev.db",
        alias="DATABASE_URL",
    )

    # Paging
    default_page_size: int = Field(
        default=10, ge=1, le=MAX_PAGE_SIZE, alias="DEFAULT_PAGE_SIZE",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
