import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_GREETING = "Hello, World"


def _greeting_from_env() -> str:
    message = os.getenv("GREETING_MESSAGE", DEFAULT_GREETING)
    if not message.strip():
        return DEFAULT_GREETING
    return message


class Settings:
    """Application settings"""

    # Greeting Configuration
    GREETING_MESSAGE: str = _greeting_from_env()

    # Application Configuration
    APP_NAME: str = os.getenv("APP_NAME", "Greeting API")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    APP_ENV: str = os.getenv("APP_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Frontend URLs
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    @classmethod
    def get_app_config(cls) -> dict:
        """Get FastAPI application keyword arguments"""
        return {
            "title": cls.APP_NAME,
            "version": cls.APP_VERSION,
            "debug": cls.DEBUG
        }

# Create settings instance
settings = Settings()
