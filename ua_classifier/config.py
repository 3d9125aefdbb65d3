# ua_classifier/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Bounded cache (entries, FIFO eviction)
    cache_size: int = 1000

    # Wall-clock budget for parse-and-classify
    parse_timeout_ms: int = 100

    # Length guard on incoming UA strings
    max_ua_length: int = 2048

    # Reported in response metadata
    parser_version: str = "1.6.0"

    # Stats report job (0 disables)
    stats_interval_seconds: int = 60

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def parse_timeout_seconds(self) -> float:
        return self.parse_timeout_ms / 1000

    class Config:
        env_file = ".env"
        env_prefix = "UA_"


settings = Settings()
