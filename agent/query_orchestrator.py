import structlog

from agent.city_extractor import CityExtractor
from agent.response_synthesizer import ResponseSynthesizer
from src.models.orchestrator import BotReply, WeatherQuery
from src.services.weather_service import WeatherService

logger = structlog.get_logger(__name__)

NO_CITY_REPLY = (
    "❓ No pude identificar la ciudad. Por favor, pregunta algo como: "
    "'¿Cómo está el clima en Buenos Aires?'"
)
NO_WEATHER_REPLY = "❌ No pude encontrar información del clima para: {city}"


class QueryOrchestrator:
    """
    Runs one weather question through extraction, retrieval and synthesis.

    Stages run strictly in order and stop at the first soft failure. Upstream
    errors are not caught here.
    """

    def __init__(
            self,
            city_extractor: CityExtractor,
            weather_service: WeatherService,
            response_synthesizer: ResponseSynthesizer
    ):
        self.city_extractor = city_extractor
        self.weather_service = weather_service
        self.response_synthesizer = response_synthesizer

    async def process_query(self, query: WeatherQuery) -> BotReply:
        """
        Answer a weather question.

        Args:
            query: The question to answer

        Returns:
            BotReply with the synthesized answer, or guidance text when no city
            or no weather data could be found

        Raises:
            UpstreamError: If any stage fails to reach its provider
        """
        logger.info("Processing weather query", question=query.raw_question)

        city = await self.city_extractor.extract_city(query.raw_question)
        if city.is_absent:
            return BotReply(text=NO_CITY_REPLY)

        reading = await self.weather_service.fetch_weather(city.name)
        if reading is None:
            return BotReply(text=NO_WEATHER_REPLY.format(city=city.name))

        text = await self.response_synthesizer.synthesize(query.raw_question, reading)
        logger.info("Weather query answered", city=city.name)
        return BotReply(text=text)

    async def answer(self, question: str) -> str:
        reply = await self.process_query(WeatherQuery(raw_question=question))
        return reply.text
