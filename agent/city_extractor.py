import structlog

from agent.prompts import CITY_EXTRACTION_PROMPT, NO_CITY_TOKEN
from src.models.orchestrator import ExtractedCity
from src.services.llm_service import LLMService

logger = structlog.get_logger(__name__)

EXTRACTION_TEMPERATURE = 0.3
EXTRACTION_MAX_TOKENS = 50


class CityExtractor:
    """Pulls a city name out of a free-form weather question with the LLM."""

    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    async def extract_city(self, question: str) -> ExtractedCity:
        """
        Ask the LLM which city the question is about.

        Args:
            question: The user's question, embedded verbatim in the prompt

        Returns:
            ExtractedCity whose name is None when no city was mentioned

        Raises:
            UpstreamError: If the LLM call fails or returns no usable text
        """
        answer = await self.llm_service.complete(
            CITY_EXTRACTION_PROMPT.format(question=question),
            temperature=EXTRACTION_TEMPERATURE,
            max_tokens=EXTRACTION_MAX_TOKENS,
        )

        name = answer.strip()
        if not name or name == NO_CITY_TOKEN:
            logger.info("No city found in question", question=question)
            return ExtractedCity(name=None)

        logger.info("City extracted from question", city=name)
        return ExtractedCity(name=name)
