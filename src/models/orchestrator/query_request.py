from pydantic import BaseModel, ConfigDict, Field


class WeatherQuery(BaseModel):
    """A single weather question taken from a chat message."""

    model_config = ConfigDict(frozen=True)

    raw_question: str = Field(..., description="Natural language weather question")
