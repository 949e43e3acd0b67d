"""
Configuration management for the Songbook gateway
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    host: str = "0.0.0.0"
    # PORT is honoured for hosting platforms that inject it
    port: int = Field(default=4000, validation_alias=AliasChoices("songbook_port", "port"))
    reload: bool = False
    graphql_path: str = "/graphql"
    cors_origins: list[str] = ["*"]

    # Document store
    store_provider: Literal["firestore", "memory"] = "firestore"
    firestore_project_id: str | None = None
    firestore_database: str | None = None
    google_credentials_path: str | None = None
    google_credentials_json: str | None = None
    memory_store_path: str | None = None

    # Monitoring
    monitoring_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("songbook_monitoring_api_key", "apollo_engine_api_key"),
    )
    monitoring_endpoint: str = "http://localhost:4317"
    service_name: str = "songbook"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SONGBOOK_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()
