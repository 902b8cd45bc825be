from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:125.0) Gecko/20100101 Firefox/125.0"


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    user_agent: str = DEFAULT_USER_AGENT
    max_redirects: int = 5
    request_timeout: float = 30.0
    throttle_seconds: float = 1.0
    max_execution_seconds: float = 20 * 60

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
