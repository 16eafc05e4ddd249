from pydantic import field_validator
from pydantic_settings import BaseSettings


def _strip_inline_comment(value: str) -> str:
    """Strip trailing inline comments that python-dotenv keeps for unquoted values."""
    idx = value.find(" #")
    if idx != -1:
        value = value[:idx]
    return value.strip()


class Settings(BaseSettings):
    google_maps_api_key: str = ""

    @field_validator("google_maps_api_key", mode="before")
    @classmethod
    def clean_api_key(cls, v: str) -> str:
        if isinstance(v, str):
            return _strip_inline_comment(v)
        return v

    maps_base_url: str = "https://maps.googleapis.com/maps/api"
    roads_base_url: str = "https://roads.googleapis.com/v1"
    request_timeout_seconds: float = 30.0
    max_retries: int = 3
    retry_base_delay: float = 1.0
    use_real_apis: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
