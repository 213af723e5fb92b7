import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 4096
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Response interpretation
    max_extract_chars: int = 20000  # cap on candidate length for truncation recovery
    recommendation_count: int = 3

    # Session persistence
    session_file: str = ".careerion_session.json"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
