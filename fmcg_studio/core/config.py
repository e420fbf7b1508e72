from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py -> core -> fmcg_studio -> project root
_ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_PATH) if _ENV_PATH.exists() else ".env",
        extra="ignore",
    )

    # Groq (chat completions)
    GROQ_API_KEY: str = ""
    GROQ_MODEL: str = "llama-3.3-70b-versatile"
    LLM_TEMPERATURE: float = 0.7
    LLM_TIMEOUT_SECONDS: float = 60.0

    # OpenAI (mockup images)
    OPENAI_API_KEY: str = ""
    IMAGE_MODEL: str = "dall-e-3"
    IMAGE_SIZE: str = "1024x1024"

    # Trend forecast defaults
    DEFAULT_CATEGORY: str = "FMCG beverages (carbonated drinks)"
    DEFAULT_REGION: str = "urban India"
    DEFAULT_TIME_HORIZON: str = "next 5 weeks"

    # Ideation chat sessions
    SESSION_TTL_SECONDS: int = 86400

    # Static download link
    DOWNLOAD_DIR: str = "static"
    DOWNLOAD_FILENAME: str = "app-release.apk"
    DOWNLOAD_AS: str = "FMCG-AI-Studio.apk"

    # API
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = Field(default="INFO")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
