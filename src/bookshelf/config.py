"""
Configuration management for the Bookshelf API
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Store
    seed_data: bool = True  # Load the fixed seed collections at startup

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()
