from src.models.weather.weather import (
    MainWeatherData,
    OpenWeatherMapResponse,
    WeatherCondition,
    WeatherReading,
    WindData,
)

__all__ = [
    "MainWeatherData",
    "OpenWeatherMapResponse",
    "WeatherCondition",
    "WeatherReading",
    "WindData",
]
