"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.value_objects.upload_policy import DEFAULT_MAX_UPLOAD_BYTES


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    lead_repository: str = "in_memory"  # in_memory or postgres
    counselor_repository: str = "in_memory"  # in_memory or postgres
    content_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when any repository is postgres
    upload_dir: str = "./uploads"
    max_upload_size_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    lead_lock_backend: str = "in_memory"  # none, in_memory or redis
    redis_url: str = "redis://localhost:6379/0"
    lead_lock_timeout_seconds: int = 30
    lead_lock_blocking_timeout_seconds: int = 10
    cors_allowed_origins: str = "*"  # comma separated

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parsed CORS origin list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
