"""Application configuration."""

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, HttpUrl, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

RESOURCES_DIR = Path(__file__).resolve().parents[1] / "resources"


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Application
    PROJECT_NAME: str = "guess-the-frame"
    SERVER_PORT: int = 4000
    ROOTPATH: str = ""
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Sentry
    SENTRY_DSN: HttpUrl | None = None

    # TMDB catalog provider
    TMDB_API_KEY: str | None = None
    TMDB_API_BASE: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE: str = "https://image.tmdb.org/t/p/original"
    TMDB_TIMEOUT_SEC: float = 10.0
    TMDB_RESPONSE_LANGUAGE: str = "en-US"
    TMDB_MAX_PAGE: int = 500  # discover rejects pages beyond this
    TMDB_FETCH_CONCURRENCY: int = 8

    # Catalog index
    CATALOG_LANGUAGES: list[str] = ["en", "hi"]
    CATALOG_DEFAULT_START_DATE: str = "2000-01-01"
    CATALOG_SNAPSHOT_DIR: Path = RESOURCES_DIR / "catalog"

    # Rounds
    ROUNDS_DEFAULT_START_DATE: str = "2000-01-01"
    ROUNDS_DEFAULT_END_DATE: str = "2024-12-31"
    RANDOM_FRAME_MAX_ATTEMPTS: int = 10

    # Answer judge (any OpenAI-compatible endpoint, Groq by default)
    OPENAI_API_KEY: str | None = None
    OPENAI_API_BASE: str = "https://api.groq.com/openai/v1"
    OPENAI_JUDGE_MODEL: str = "llama3-8b-8192"
    LLM_ENABLED: bool = True  # off: every guess is scored as wrong
    ANSWER_FALLBACK_GUESS: str = "rnblqbfdvqqelvcq"


settings = Settings()
