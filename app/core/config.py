"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Booster Program Scheduler"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Booster Coaching Team"]
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "booster"

    # Full URL override (e.g. sqlite:///./booster.db for local runs)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Booster program
    BOOSTER_WEEK_STARTS_ON: str = "sunday"
    BOOSTER_TEMPLATE_FILE: str = "booster_templates_v1.json"
    BOOSTER_DEFAULT_VARIANT: str = "male"
    BOOSTER_NOTIFICATIONS_ENABLED: bool = True
    BOOSTER_NOTIFICATION_SENDER: str = "system"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
