from src.exceptions.base import ClimaBotError
from src.exceptions.config import ConfigurationError
from src.exceptions.upstream import (
    LLMConnectionError,
    LLMResponseError,
    UpstreamError,
    WeatherRequestError,
)

__all__ = [
    "ClimaBotError",
    "ConfigurationError",
    "UpstreamError",
    "WeatherRequestError",
    "LLMConnectionError",
    "LLMResponseError",
]
