"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000

    # MongoDB (Atlas credentials, or an explicit URI)
    db_user: Optional[str] = None
    db_pass: Optional[str] = None
    mongo_host: str = "cluster0.ej6qyrh.mongodb.net"
    mongo_uri: Optional[str] = None
    db_name: str = "Book-vibe"

    # JWT Configuration
    access_token_secret: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def resolved_mongo_uri(self) -> str:
        """MongoDB connection string: explicit URI, then Atlas credentials, then localhost."""
        if self.mongo_uri:
            return self.mongo_uri
        if self.db_user and self.db_pass:
            return (
                f"mongodb+srv://{self.db_user}:{self.db_pass}@{self.mongo_host}/"
                "?retryWrites=true&w=majority&appName=Cluster0"
            )
        return "mongodb://localhost:27017"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
