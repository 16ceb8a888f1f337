from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class CopilotSettings(BaseSettings):
    """Card-interpretation copilot. Demo mode serves the fixed demo insights instead of calling out."""
    enabled: bool = True
    demo_mode: bool = True
    function_url: str = "http://localhost:54321/functions/v1/interpret-cards"
    api_key: Optional[str] = None
    timeout_seconds: float = 30.0
    max_attempts: int = 3
    retry_backoff_seconds: float = 1.0
    demo_delay_seconds: float = 0.0

    model_config = SettingsConfigDict(env_prefix='COPILOT_')


class AppSettings(BaseSettings):
    log_level: str = "INFO"
    deck_path: Optional[str] = None  # bundled assets/tarot_deck.yml when unset

    model_config = SettingsConfigDict(env_prefix='APP_')


def get_copilot_settings() -> CopilotSettings:
    return CopilotSettings()


def get_app_settings() -> AppSettings:
    return AppSettings()
