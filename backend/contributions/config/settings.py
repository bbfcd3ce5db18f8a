from pydantic_settings import BaseSettings
from pydantic import field_validator
from functools import lru_cache
from enum import Enum


class ThreadStrategy(str, Enum):
    """How the in-memory contribution store finds the children of a node"""
    SCAN = "scan"    # Scan every stored contribution per node
    INDEX = "index"  # Parent -> children index maintained on save


class Settings(BaseSettings):
    """
    Contribution settings loaded from environment variables.

    Environment variables can come from:
    - .env file
    - System environment

    Variable names are prefixed with CONTRIBUTIONS_:
    - CONTRIBUTIONS_SESSION_ID_SIZE (hex chars per session ID)
    - CONTRIBUTIONS_THREAD_STRATEGY (scan or index)
    - CONTRIBUTIONS_LOG_LEVEL
    """

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Sessions (10 hex chars = 40 bits)
    session_id_size: int = 10

    # Thread reconstruction
    thread_strategy: ThreadStrategy = ThreadStrategy.SCAN

    class Config:
        env_prefix = "CONTRIBUTIONS_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra env vars

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept 'debug', 'Debug', etc."""
        return str(v).upper() if v else "INFO"

    @field_validator('thread_strategy', mode='before')
    @classmethod
    def normalize_thread_strategy(cls, v):
        """Accept 'INDEX', 'Scan', etc."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
