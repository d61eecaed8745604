"""Process configuration read from the environment (and an optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from .bio import BioGenerator, ExternalBioConfig, ExternalBioGenerator, MockBioGenerator

AI_PROVIDERS = ("mock", "openai")


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "persons_finder"
    ai_provider: str = "mock"
    openai_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    openai_max_tokens: int = 100
    openai_temperature: float = 0.7
    openai_timeout_seconds: float = 60.0
    sanitizer_max_length: int = 500
    nearby_default_limit: int = 1000
    log_level: str = "INFO"
    cors_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    def __post_init__(self) -> None:
        if self.ai_provider not in AI_PROVIDERS:
            raise ValueError(
                f"Unsupported AI_PROVIDER {self.ai_provider!r}; expected one of {AI_PROVIDERS}"
            )
        if self.ai_provider == "openai" and not self.openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY not found in environment variables. "
                "Set it or switch AI_PROVIDER to 'mock'."
            )


def load_settings(env_file: str | None = None) -> Settings:
    """Build settings from environment variables, loading ``.env`` first."""

    load_dotenv(env_file)
    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        mongodb_database=os.getenv("MONGODB_DATABASE", "persons_finder"),
        ai_provider=os.getenv("AI_PROVIDER", "mock").strip().lower(),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        openai_max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "100")),
        openai_temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        openai_timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60")),
        sanitizer_max_length=int(os.getenv("SANITIZER_MAX_LENGTH", "500")),
        nearby_default_limit=int(os.getenv("NEARBY_DEFAULT_LIMIT", "1000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=(
            [origin.strip() for origin in origins.split(",") if origin.strip()]
            if origins
            else ["http://localhost:3000", "http://127.0.0.1:3000"]
        ),
    )


def build_bio_generator(settings: Settings) -> BioGenerator:
    """Return the single bio generator active for this process."""

    if settings.ai_provider == "openai":
        return ExternalBioGenerator(
            ExternalBioConfig(
                api_key=settings.openai_api_key or "",
                base_url=settings.openai_base_url,
                model=settings.openai_model,
                max_tokens=settings.openai_max_tokens,
                temperature=settings.openai_temperature,
                timeout_seconds=settings.openai_timeout_seconds,
            )
        )
    return MockBioGenerator()
