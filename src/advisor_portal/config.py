"""Configuration for the Advisor Portal server."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Advisor Portal configuration settings."""

    # Remote MyAdvisor backend
    REMOTE_API_URL: str = "https://backend.myadvisor.sg"

    # Sessions
    SESSION_COOKIE_NAME: str = "portal_session"
    SESSION_TTL_HOURS: int = 24
    SESSION_COOKIE_SECURE: bool = False

    # Refresh the remote access token this many seconds before it expires
    TOKEN_REFRESH_LEEWAY_SECONDS: int = 30

    # Load sample users, messages and replies into the in-memory store at boot
    SEED_DEMO_DATA: bool = True

    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


# Global settings instance
settings = Settings()
