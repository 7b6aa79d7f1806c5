"""
Configuration management for FakeQL
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Dataset
    user_count: int = Field(default=10, ge=0)
    albums_per_user: int = Field(default=5, ge=0)
    photos_per_album: int = Field(default=10, ge=0)
    data_seed: int | None = None  # None: a different dataset every process

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "FAKEQL_"
        case_sensitive = False


# Global settings instance
settings = Settings()

if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        user_count=settings.user_count,
        data_seed=settings.data_seed,
    )
