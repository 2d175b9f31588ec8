from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="LIN_API_", extra="ignore")

    api_version: str = "v1"
    base_url: str = "https://api.linkedin.com/v1/"
    log_level: str = "INFO"
    debug: bool = False


def get_settings() -> Settings:
    return Settings()
