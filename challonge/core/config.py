import logging

from pydantic import validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    LOG_DECODE_FAILURES: bool = True
    DROPPED_RECORD_LOG_LEVEL: str = "WARNING"

    class Config:
        env_file = ".env"
        env_prefix = "CHALLONGE_"
        # .env may also hold client credentials such as CHALLONGE_API_KEY
        extra = "ignore"

    @validator('DROPPED_RECORD_LOG_LEVEL')
    def known_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {v}")
        return level

settings = Settings()
