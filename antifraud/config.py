"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "anti-fraud-api"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8080

    # Load the demo profile and blacklist at startup
    seed_sample_data: bool = True

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
