"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Public key published by BART for anyone trying out the API
DEFAULT_API_KEY = "MW9S-E7SL-26DU-VV8V"


class BartConfig(BaseSettings):
    """BART API client configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="BART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    api_key: str = Field(default=DEFAULT_API_KEY, description="BART API key")
    host: str = Field(default="api.bart.gov", description="Host serving the BART API")
    scheme: str = Field(
        default="http",
        description="URL scheme: 'http' or 'https' (the upstream API is served over plain HTTP)",
    )
    timeout_seconds: float = Field(
        default=10, description="Total timeout for a single API request in seconds"
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Fall back to the public key when an empty key is configured."""
        return v.strip() or DEFAULT_API_KEY

    @field_validator("scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Validate scheme is either 'http' or 'https'."""
        if v.lower() not in ("http", "https"):
            raise ValueError("scheme must be either 'http' or 'https'")
        return v.lower()

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("timeout_seconds must be greater than 0")
        return v
