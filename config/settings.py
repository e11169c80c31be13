"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    app_title: str = "PPh21 Calculator"
    log_level: str = "INFO"
    currency_symbol: str = "Rp"
    currency_decimals: int = 2

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
