"""
Configuration management for Chatra Shayak.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Search provider
    tavily_api_key: str = ""
    tavily_api_url: str = "https://api.tavily.com/search"

    # Web app
    cors_origins: str = "http://localhost:3000"
    host: str = "127.0.0.1"
    port: int = 8000

    # Show a message on the form when the search call fails (silent by default)
    surface_search_errors: bool = False

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
