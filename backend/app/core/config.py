from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    database_url: str = "sqlite:///./weight-tracker.db"
    # Path to a SQLite file. When set it takes precedence over database_url.
    database_path: str | None = None
    sql_echo: bool = False

    # Single origin allowed to call the API (the frontend dev server by default)
    cors_origin: str = "http://localhost:3000"

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Allow empty env strings for optional fields
    @field_validator("database_path", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v in ("", None, "null", "None"):
            return None
        return v

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_path:
            return f"sqlite:///{self.database_path}"
        return self.database_url

    class Config:
        env_file = ".env"


settings = Settings()
