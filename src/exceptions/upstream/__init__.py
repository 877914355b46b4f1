from src.exceptions.upstream.llm_connection_error import LLMConnectionError
from src.exceptions.upstream.llm_response_error import LLMResponseError
from src.exceptions.upstream.upstream_error import UpstreamError
from src.exceptions.upstream.weather_request_error import WeatherRequestError

__all__ = [
    "UpstreamError",
    "WeatherRequestError",
    "LLMConnectionError",
    "LLMResponseError",
]
