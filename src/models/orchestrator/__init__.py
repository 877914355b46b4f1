from src.models.orchestrator.bot_reply import BotReply
from src.models.orchestrator.extracted_city import ExtractedCity
from src.models.orchestrator.query_request import WeatherQuery

__all__ = ["BotReply", "ExtractedCity", "WeatherQuery"]
