"""Module: config."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # HTTP listener.
    host: str = "0.0.0.0"
    port: int = 3000

    # Relational store. DATABASE_URL wins over the individual parts when set.
    database_url: str | None = None
    db_driver: str = "postgresql+psycopg"
    db_host: str = "localhost"
    db_port: int | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_name: str = "pets"

    # Connection pool bounds shared by every request.
    db_pool_size: int = 10
    db_max_overflow: int = 0
    db_pool_timeout: float = 30.0

    log_level: str = "INFO"

    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


# Global settings instance imported by app modules at runtime.
settings = Settings()
