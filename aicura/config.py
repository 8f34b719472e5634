from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    # External generative model (OpenAI-compatible chat completions endpoint)
    analysis_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    analysis_model: str = "gemini-2.0-flash"
    analysis_api_key: str = Field(
        default="demo-key",
        validation_alias=AliasChoices(
            "AICURA_ANALYSIS_API_KEY",
            "GEMINI_API_KEY",
            "OPENAI_API_KEY",
        ),
    )
    analysis_max_tokens: int = 1024
    analysis_temperature: float = 0.2
    analysis_request_timeout_seconds: float = 20.0
    analysis_enabled: bool = True
    analysis_log_enabled: bool = False
    analysis_log_path: str = "logs/analysis_calls.jsonl"

    # Local matcher
    matcher_top_n: int = 5

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = {"env_prefix": "AICURA_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
