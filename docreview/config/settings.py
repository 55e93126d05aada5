from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "gemini"

    analysis_gemini_api_key: str = ""
    analysis_gemini_model_name: str = "gemini-2.5-flash"
    analysis_gemini_timeout_seconds: int = 120

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 120

    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_timeout_seconds: int = 120

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = "google/gemini-2.5-flash"
    analysis_openrouter_timeout_seconds: int = 120
