"""
Application configuration from environment variables.
Loads .env from the backend directory so API keys are found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default model for Gemini generateContent. Older ids return 404 for new keys.
_DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"

_RETIRED_GEMINI_MODELS = frozenset({
    "gemini-pro", "gemini-1.5-flash", "gemini-1.5-flash-001", "gemini-1.5-flash-002",
    "gemini-1.5-pro", "gemini-1.5-pro-001", "gemini-1.5-pro-002",
    "gemini-2.0-flash", "gemini-2.0-flash-001", "gemini-2.0-flash-lite",
})


def normalize_gemini_model(v: str) -> str:
    """Map empty or retired Gemini model ids to the default."""
    s = (v or "").strip()
    if not s or s in _RETIRED_GEMINI_MODELS or s.startswith("gemini-1.5-"):
        return _DEFAULT_GEMINI_MODEL
    return s


# .env next to backend/ (parent of beyondchats/)
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite for local use, postgresql for deployments
    database_url: str = "sqlite:///./beyondchats_dev.db"

    # Routes are mounted under this prefix (the web client calls /api/...)
    api_prefix: str = "/api"

    # Single-tenant demo user; stands in for authentication
    demo_user_id: str = "00000000-0000-4000-8000-000000000001"
    demo_user_email: str = "demo@beyondchats.com"
    demo_user_name: str = "Demo User"

    # Uploads
    upload_dir: Path = Path("./uploads")
    max_upload_bytes: int = 10 * 1024 * 1024

    # Chunking: ~chunk_chars per chunk at ~6 chars per word; drop fragments of min_chunk_chars or less
    chunk_chars: int = 1000
    min_chunk_chars: int = 50

    # Chat: how many prior messages go into the prompt
    chat_history_limit: int = 10

    # LLM: openai | gemini. Missing key for the selected provider falls back to the mock.
    llm_provider: str = "openai"
    openai_api_key: str = ""
    openai_model: str = "gpt-4"
    gemini_api_key: str = ""
    gemini_model: str = _DEFAULT_GEMINI_MODEL
    chat_temperature: float = 0.7
    chat_max_tokens: int = 1000
    quiz_temperature: float = 0.7
    quiz_max_tokens: int = 2000

    @field_validator("gemini_model", mode="before")
    @classmethod
    def _resolve_gemini_model(cls, v: str) -> str:
        return normalize_gemini_model(v) if isinstance(v, str) else _DEFAULT_GEMINI_MODEL

    recent_quiz_limit: int = 10
    recent_activity_limit: int = 5
    # Dashboard estimate: minutes credited per completed attempt
    minutes_per_attempt: int = 15

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000"

    # When true, 500 responses include the exception type and message
    debug: bool = False

    @property
    def upload_path(self) -> Path:
        """upload_dir as an absolute path; relative values are taken from backend/."""
        path = self.upload_dir if self.upload_dir.is_absolute() else _BACKEND_DIR / self.upload_dir
        return path.resolve()

    @property
    def active_llm_model(self) -> str:
        """Model name for display and logs."""
        if (self.llm_provider or "").strip().lower() == "gemini":
            return self.gemini_model
        return self.openai_model


settings = Settings()
