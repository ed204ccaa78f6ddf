"""
Configuration management for the Pokedex API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # Plain PORT is honoured so the server runs on hosts that inject it
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("POKEDEX_API_PORT", "PORT", "api_port"),
    )
    api_reload: bool = False
    graphiql: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]

    # Seed data (None means the bundled seed)
    seed_path: str | None = None

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    @property
    def json_logs(self) -> bool:
        """Production deployments log one JSON object per line."""
        return self.environment.lower() == "production"

    class Config:
        env_file = ".env"
        env_prefix = "POKEDEX_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()
