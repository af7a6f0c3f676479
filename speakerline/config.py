"""Application configuration. Loads from env vars."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings. Override via environment variables."""

    # Remote analysis service: multipart POST with audio_file (+ optional rttm_file)
    ANALYZER_URL: str = "https://hafsaabd82-audio-analyzer.hf.space/upload"
    # Analysis of a long recording can take minutes on the service side.
    ANALYZER_TIMEOUT_SECONDS: float = 300.0

    # Reject uploads larger than this before sending (bytes). 0 = no limit.
    MAX_UPLOAD_BYTES: int = 0

    # Logging: level (DEBUG, INFO, WARNING, ERROR); file path = also write logs to file (empty = console only).
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    class Config:
        env_file = ".env"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
