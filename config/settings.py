"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    gemini_api_key: str = ""
    llm_default_model: str = "gemini/gemini-2.5-flash"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 150
    max_history_turns: int = 6
    knowledge_base_file: str = "knowledge_base.txt"

    @property
    def chat_enabled(self) -> bool:
        """Chat proxy needs an upstream credential before it can relay anything."""
        return bool(self.gemini_api_key)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
