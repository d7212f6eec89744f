from typing import Literal, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "13 Moon Kin API"
    DEFAULT_TZ: str = "Asia/Taipei"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    MESSAGES_FILE: Optional[str] = None

    class Config:
        env_file = ".env"

settings = Settings()
