import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx

from src.config.config import Config
from src.models.weather.weather import WeatherReading

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def make_weather_response(status_code=200, json=None, text=None):
    """Build a real httpx response for the weather endpoint."""
    request = httpx.Request("GET", WEATHER_URL)
    if json is not None:
        return httpx.Response(status_code, json=json, request=request)
    return httpx.Response(status_code, text=text or "", request=request)


@pytest.fixture
def mock_config():
    """Configuration with test credentials, isolated from the environment."""
    return Config(
        _env_file=None,
        discord_token="test-discord-token",
        groq_api_key="test-groq-key",
        openweather_api_key="test-weather-key",
    )


@pytest.fixture
def openweather_payload():
    """OpenWeatherMap current weather response for Lima."""
    return {
        "coord": {"lon": -77.0282, "lat": -12.0432},
        "weather": [{"id": 800, "main": "Clear", "description": "cielo claro", "icon": "01d"}],
        "base": "stations",
        "main": {
            "temp": 22.0,
            "feels_like": 21.0,
            "temp_min": 21.5,
            "temp_max": 22.8,
            "pressure": 1013,
            "humidity": 60
        },
        "visibility": 10000,
        "wind": {"speed": 3.0, "deg": 200},
        "clouds": {"all": 0},
        "dt": 1696161600,
        "sys": {"country": "PE", "sunrise": 1696138800, "sunset": 1696182000},
        "timezone": -18000,
        "id": 3936456,
        "name": "Lima",
        "cod": 200
    }


@pytest.fixture
def sample_weather_reading():
    """Sample weather reading with all required fields."""
    return WeatherReading(
        city="Lima",
        temperature_c=22.0,
        feels_like_c=21.0,
        humidity_pct=60,
        description="cielo claro",
        wind_speed_ms=3.0,
    )


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for the weather service."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    return mock_client


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client for the LLM service."""
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock()
    mock_client.close = AsyncMock()
    return mock_client


@pytest.fixture
def mock_llm_service():
    """Mock LLM service for extractor and synthesizer testing."""
    mock_service = AsyncMock()
    mock_service.complete = AsyncMock()
    return mock_service


@pytest.fixture
def mock_reply_channel():
    """Mock outbound chat channel."""
    mock_channel = MagicMock()
    mock_channel.send = AsyncMock()
    mock_channel.show_typing = AsyncMock()
    return mock_channel
