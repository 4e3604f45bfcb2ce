"""Configuration management."""

from functools import cache

from pydantic import (
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings

from ..consts import API_BASE_URL, DATASET_FILENAME, SECRETS_FILENAME, TOKEN_URL

_HTTP_URL = TypeAdapter(HttpUrl)


class Config(BaseSettings):
    """Runtime settings, overridable through PBIREFRESH_* environment variables."""

    model_config = ConfigDict(
        env_prefix="PBIREFRESH_", case_sensitive=False, extra="ignore"
    )
    secrets_file: str = Field(
        default=SECRETS_FILENAME, description="Path to the TOML secrets file"
    )
    dataset_file: str = Field(
        default=DATASET_FILENAME, description="Path to the JSON dataset file"
    )
    token_url: str = Field(
        default=TOKEN_URL, description="OAuth2 token endpoint of the identity provider"
    )
    api_base_url: str = Field(
        default=API_BASE_URL, description="Base URL of the Power BI REST API"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )
    timeout_seconds: int = Field(
        default=30, gt=0, le=300, description="HTTP request timeout in seconds"
    )

    @field_validator("token_url", "api_base_url")
    @classmethod
    def _must_be_http_url(cls, value: str) -> str:
        # Validate only; keep the string exactly as configured
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as e:
            raise ValueError(f"not an http(s) URL: {e.errors()[0]['msg']}") from e
        return value

    def __repr__(self) -> str:
        return (
            f"Config(api_base_url='{self.api_base_url}', "
            f"log_level='{self.log_level}')"
        )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()
