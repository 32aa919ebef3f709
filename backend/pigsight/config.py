"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pigsight_env: str = "development"
    pigsight_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Azure AI Content Understanding
    content_understanding_endpoint: str = ""
    content_understanding_key: str = ""
    analyzer_id: str = "prebuilt-imageAnalyzer"
    api_version: str = "2025-05-01-preview"
    request_timeout_seconds: float = 30.0

    # Polling: 60 attempts, 1s apart
    poll_interval_seconds: float = 1.0
    max_poll_attempts: int = 60

    # Skip trait inference when the caption does not look like a pig
    require_subject_match: bool = True

    # Image submitted by the connection check
    probe_image_url: str = (
        "https://github.com/Azure-Samples/azure-ai-content-understanding-python"
        "/raw/refs/heads/main/data/pieChart.jpg"
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
