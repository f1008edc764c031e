from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "AI Resume & Portfolio Builder API"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    trust_proxy: bool = False
    # Proxy addresses whose X-Forwarded-* headers are honoured (comma-separated or "*")
    forwarded_allow_ips: str = "127.0.0.1"
    max_body_bytes: int = 1024 * 1024

    # CORS (comma-separated; empty allows every origin)
    cors_origins: str = ""

    # Gemini (no default key, generation fails with 500 until it is set)
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini/gemini-2.5-flash"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def should_trust_proxy(self) -> bool:
        return self.trust_proxy or self.is_production

    @property
    def trusted_proxy_hosts(self) -> list[str]:
        return [host.strip() for host in self.forwarded_allow_ips.split(",") if host.strip()]

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()

APP_VERSION = "0.1.0"
