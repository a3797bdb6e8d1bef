"""Application configuration."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Storage
    storage_backend: str = "json"  # "json" or "sql"
    data_dir: Path = Path("./data")
    records_file: str = "orders.json"
    database_url: str = "sqlite:///./data/trip_vote.db"

    # Catalog
    catalog_path: Optional[Path] = None
    trip_options: Optional[list[str]] = None

    # Server
    host: str = "127.0.0.1"
    port: int = 3001
    log_level: str = "info"

    # CORS (comma-separated origins)
    cors_origins: str = "*"

    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def cors_allows_credentials(self) -> bool:
        origins = self.cors_origin_list()
        return "*" not in origins

    def records_path(self) -> Path:
        return self.data_dir / self.records_file


settings = Settings()
