import sys

import discord
import structlog

from agent import CityExtractor, QueryOrchestrator, ResponseSynthesizer
from src.bot.discord_client import ClimaDiscordClient
from src.bot.dispatcher import MessageDispatcher
from src.config.config import Config, load_config
from src.exceptions.config import ConfigurationError
from src.services.llm_service import LLMService
from src.services.weather_service import WeatherService
from src.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)


def create_client(config: Config) -> ClimaDiscordClient:
    """
    Wire the weather pipeline and the Discord client together.

    Args:
        config: Application configuration

    Returns:
        Discord client ready to be started with the bot token
    """
    llm_service = LLMService(config)
    weather_service = WeatherService(config)

    orchestrator = QueryOrchestrator(
        city_extractor=CityExtractor(llm_service),
        weather_service=weather_service,
        response_synthesizer=ResponseSynthesizer(llm_service),
    )
    dispatcher = MessageDispatcher(orchestrator, trigger=config.command_prefix)

    return ClimaDiscordClient(dispatcher, services=(llm_service, weather_service))


def main():
    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error("Missing environment configuration", error=str(e))
        logger.error("Make sure DISCORD_TOKEN, GROQ_API_KEY and OPENWEATHER_API_KEY are set")
        sys.exit(1)

    setup_logging(config)
    logger.info(
        f"Starting Clima Bot in {config.environment} environment",
        model=config.groq_model,
        trigger=config.command_prefix,
    )

    client = create_client(config)

    try:
        client.run(config.discord_token, log_handler=None)
    except discord.LoginFailure as e:
        logger.error("Discord rejected the bot token", error=str(e))
        sys.exit(1)
    except Exception as e:
        logger.error("Bot stopped unexpectedly", error=str(e), exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
