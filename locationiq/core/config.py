from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.locationiq.com/v1"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Maps
    maps_provider: str = "locationiq"
    locationiq_api_key: str = ""
    locationiq_base_url: str = DEFAULT_BASE_URL

    # App
    environment: str = "development"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
