from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

SUPABASE_CLIENT_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
    "x-supabase-client-platform",
    "x-supabase-client-platform-version",
    "x-supabase-client-runtime",
    "x-supabase-client-runtime-version",
]


class Settings(BaseSettings):
    env: str = "development"
    api_v1_prefix: str = "/api/v1"
    allowed_origins: str = "*"
    log_level: str = "INFO"

    ai_gateway_api_key: str | None = None
    ai_gateway_base_url: str = "https://ai.gateway.lovable.dev/v1"
    ai_model: str = "google/gemini-3-flash-preview"
    ai_timeout_seconds: float = 60.0

    default_quiz_count: int = 5
    max_quiz_count: int = 20

    redis_url: str = ""
    progress_key_prefix: str = "progress_"

    rate_limit_requests: int = 60
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
