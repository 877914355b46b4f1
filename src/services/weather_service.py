from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import Config
from src.exceptions.upstream import WeatherRequestError
from src.models.weather.weather import OpenWeatherMapResponse, WeatherReading

logger = structlog.get_logger(__name__)

UNITS = "metric"
LANGUAGE = "es"


class WeatherService:
    """
    Service for fetching current weather from the OpenWeatherMap API.

    A city the provider does not know, an error status, or a response that does
    not carry every field the bot needs is reported as "not found" (None).
    Only transport failures are raised, as WeatherRequestError.
    """

    def __init__(self, config: Config, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the weather service.

        Args:
            config: Application configuration
            http_client: Shared HTTP client; one is created when omitted
        """
        self.base_url = config.openweather_base_url
        self.api_key = config.openweather_api_key

        # HTTP client configuration
        self.timeout = httpx.Timeout(config.request_timeout_seconds, connect=config.connect_timeout_seconds)
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def _make_request(self, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Make a single HTTP request to the OpenWeatherMap API.

        Args:
            params: Query parameters

        Returns:
            Decoded JSON body, or None if the provider answered with an error
            status or an unparsable body

        Raises:
            WeatherRequestError: If the request could not be completed
        """
        params = {**params, "appid": self.api_key, "units": UNITS, "lang": LANGUAGE}

        try:
            response = await self._client.get(self.base_url, params=params)
        except httpx.TimeoutException as e:
            logger.error("Weather request timed out", error=str(e))
            raise WeatherRequestError(f"Request timeout: {str(e)}") from e
        except httpx.RequestError as e:
            logger.error("Weather request failed", error=str(e))
            raise WeatherRequestError(f"Request failed: {str(e)}") from e

        if not response.is_success:
            logger.warning(
                "Weather API returned an error status",
                status_code=response.status_code,
                response_text=response.text,
            )
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Weather API returned an unparsable body", error=str(e))
            return None

    async def fetch_weather(self, city: str) -> Optional[WeatherReading]:
        """
        Get current weather data for a city.

        Args:
            city: Name of the city, passed to the provider as free text

        Returns:
            WeatherReading with current weather data, or None if not found

        Raises:
            WeatherRequestError: For transport failures
        """
        logger.info("Fetching current weather", city=city)

        data = await self._make_request({"q": city})
        if data is None:
            logger.info("No weather data found", city=city)
            return None

        try:
            response = OpenWeatherMapResponse.model_validate(data)
        except ValidationError as e:
            logger.warning("Failed to parse weather data", city=city, error=str(e))
            return None

        reading = WeatherReading.from_openweather_response(city, response)
        logger.info("Successfully fetched current weather", city=city)
        return reading

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()
