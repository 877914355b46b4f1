from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions.config import ConfigurationError

REQUIRED_CREDENTIALS = ("discord_token", "groq_api_key", "openweather_api_key")


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Built once at startup and handed to every component constructor. The
    instance is frozen so that concurrent pipeline runs can share it safely.
    """

    # Credentials
    discord_token: str = Field(..., description="Discord bot token")
    groq_api_key: str = Field(..., description="Groq API key for chat completions")
    openweather_api_key: str = Field(..., description="OpenWeatherMap API key for weather data")

    # Groq (OpenAI-compatible) Configuration
    groq_base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Base URL of the OpenAI-compatible Groq API",
    )
    groq_model: str = Field(default="llama-3.3-70b-versatile", description="Chat completion model")

    # OpenWeatherMap Configuration
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )

    # Bot Configuration
    command_prefix: str = Field(default="!clima", min_length=1, description="Trigger prefix for weather questions")

    # HTTP Configuration
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Overall timeout per outbound call")
    connect_timeout_seconds: float = Field(default=10.0, gt=0, description="Connect timeout per outbound call")

    # Logging Configuration
    environment: str = Field(default="production", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_dir: str = Field(default="logs", description="Directory for log files")

    @field_validator(*REQUIRED_CREDENTIALS)
    def validate_credential(cls, v, info):
        if not v or not v.strip():
            raise ValueError(f"{info.field_name.upper()} must not be empty")
        return v.strip()

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


def load_config(**overrides) -> Config:
    """
    Build the application configuration.

    Args:
        overrides: Explicit values that take precedence over the environment

    Returns:
        Validated, immutable Config instance

    Raises:
        ConfigurationError: If a credential is missing or a value is invalid
    """
    try:
        return Config(**overrides)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "config"
            if error["type"] == "missing" and field in REQUIRED_CREDENTIALS:
                problems.append(f"{field.upper()} is not set")
            else:
                problems.append(f"{field}: {error['msg']}")
        raise ConfigurationError("Invalid configuration: " + "; ".join(problems)) from e
