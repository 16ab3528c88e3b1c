"""Application configuration."""

import os
from dataclasses import dataclass

import dotenv

dotenv.load_dotenv()


@dataclass
class AppSettings:
    """Main application settings with environment variable overrides."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Chat endpoint consumed by the chat service
    chat_url: str = "http://localhost:8000/api/chat"
    default_locale: str = "en"

    # Ollama
    ollama_url: str = "http://localhost:11434/api/generate"
    model_name: str = "qwen2.5:3b"

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppSettings":
        return cls(
            host=os.getenv("APP_HOST", cls.host),
            port=int(os.getenv("APP_PORT", cls.port)),
            chat_url=os.getenv("CHAT_URL", cls.chat_url),
            default_locale=os.getenv("DEFAULT_LOCALE", cls.default_locale),
            ollama_url=os.getenv("OLLAMA_URL", cls.ollama_url),
            model_name=os.getenv("MODEL_NAME", cls.model_name),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
        )


settings = AppSettings.from_env()
