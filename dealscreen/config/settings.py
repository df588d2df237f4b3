from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    llm_provider: str = "huggingface"
    llm_model: str = ""
    llm_api_key: str = ""
    llm_base_url: str = ""
    llm_timeout_seconds: int = 60
    llm_temperature: float = 0.3
    llm_max_tokens: int = 2000
    llm_max_attempts: int = 2
    llm_max_retry_delay_seconds: int = 30

    classifier_max_chars: int = 6000
    min_text_length: int = 100

    pdf_engine: str = "pdfplumber"
