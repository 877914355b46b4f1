from typing import List

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    """Weather condition details."""

    description: str = Field(..., description="Detailed weather description")


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: float = Field(..., description="Current temperature")
    feels_like: float = Field(..., description="Human perception of temperature")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")


class WindData(BaseModel):
    """Wind information."""

    speed: float = Field(..., ge=0, description="Wind speed in m/s")


class OpenWeatherMapResponse(BaseModel):
    """
    The subset of the OpenWeatherMap current weather response the bot relies on.

    Every field is required; a response missing any of them fails validation.
    """

    weather: List[WeatherCondition] = Field(..., min_length=1, description="Weather conditions")
    main: MainWeatherData = Field(..., description="Main weather data")
    wind: WindData = Field(..., description="Wind information")


class WeatherReading(BaseModel):
    """Current weather for one city, as handed to the response synthesizer."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(..., description="City name as asked by the user")
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float = Field(..., description="Feels like temperature in Celsius")
    humidity_pct: int = Field(..., ge=0, le=100, description="Humidity percentage")
    description: str = Field(..., description="One-line weather description")
    wind_speed_ms: float = Field(..., ge=0, description="Wind speed in m/s")

    @classmethod
    def from_openweather_response(cls, city: str, response: OpenWeatherMapResponse) -> "WeatherReading":
        """
        Create a WeatherReading from an OpenWeatherMap API response.

        Args:
            city: City name the reading was requested for
            response: Validated OpenWeatherMap API response

        Returns:
            WeatherReading: Reading with all six fields populated
        """
        return cls(
            city=city,
            temperature_c=response.main.temp,
            feels_like_c=response.main.feels_like,
            humidity_pct=response.main.humidity,
            description=response.weather[0].description,
            wind_speed_ms=response.wind.speed,
        )

    def to_prompt_text(self) -> str:
        """Render the reading as the plain-text block embedded in LLM prompts."""
        return (
            f"Ciudad: {self.city}\n"
            f"Temperatura: {self.temperature_c:.1f}°C\n"
            f"Sensación térmica: {self.feels_like_c:.1f}°C\n"
            f"Descripción: {self.description}\n"
            f"Humedad: {self.humidity_pct:d}%\n"
            f"Viento: {self.wind_speed_ms:.1f} m/s"
        )
