import structlog

from agent.prompts import WEATHER_ANSWER_PROMPT
from src.exceptions.upstream import LLMResponseError
from src.models.weather.weather import WeatherReading
from src.services.llm_service import LLMService

logger = structlog.get_logger(__name__)

SYNTHESIS_TEMPERATURE = 0.7
SYNTHESIS_MAX_TOKENS = 300

FALLBACK_REPLY = "❌ Error al generar la respuesta"


class ResponseSynthesizer:
    """
    Phrases the final answer from the user's question and a weather reading.

    Unlike city extraction, a bad LLM response here does not fail the request:
    the weather was already fetched, so the user gets FALLBACK_REPLY instead.
    Transport failures still propagate.
    """

    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    @staticmethod
    def build_prompt(question: str, reading: WeatherReading) -> str:
        return WEATHER_ANSWER_PROMPT.format(question=question, weather=reading.to_prompt_text())

    async def synthesize(self, question: str, reading: WeatherReading) -> str:
        """
        Generate a conversational answer grounded on the reading.

        Args:
            question: Original user question
            reading: Weather data for the extracted city

        Returns:
            The LLM's answer unmodified, or FALLBACK_REPLY if the LLM response was unusable

        Raises:
            LLMConnectionError: If the LLM could not be reached
        """
        try:
            return await self.llm_service.complete(
                self.build_prompt(question, reading),
                temperature=SYNTHESIS_TEMPERATURE,
                max_tokens=SYNTHESIS_MAX_TOKENS,
            )
        except LLMResponseError as e:
            logger.warning("Falling back to default reply", city=reading.city, error=str(e))
            return FALLBACK_REPLY
