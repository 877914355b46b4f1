import logging

import httpx
import pytest
import structlog

from src.config.config import Config
from src.services.weather_service import WeatherService
from src.utils.logging_config import get_log_file_path, setup_logging

SECRET_KEY = "SECRET-OWM-KEY"


@pytest.fixture
def logging_config(tmp_path):
    """Configuration writing logs under a temporary directory."""
    return Config(
        _env_file=None,
        discord_token="test-discord-token",
        groq_api_key="test-groq-key",
        openweather_api_key=SECRET_KEY,
        environment="test",
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def restore_logging():
    """Undo the global logging changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    library_levels = {name: logging.getLogger(name).level for name in ("discord", "httpx", "httpcore")}
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    for name, library_level in library_levels.items():
        logging.getLogger(name).setLevel(library_level)
    structlog.reset_defaults()


def _read_log(config: Config) -> str:
    for handler in logging.getLogger().handlers:
        handler.flush()
    return get_log_file_path(config).read_text(encoding="utf-8")


class TestLoggingConfig:
    """Test cases for the logging setup."""

    def test_setup_logging_writes_log_file(self, logging_config, restore_logging):
        """Test the log file is created with the expected line format."""
        setup_logging(logging_config)

        content = _read_log(logging_config)

        assert get_log_file_path(logging_config).name == "clima_bot_test.log"
        assert "[INFO] [logging_config]:" in content
        assert "Logging configured" in content

    @pytest.mark.parametrize("log_level", ["INFO", "DEBUG"])
    def test_http_client_loggers_are_quieted(self, logging_config, restore_logging, log_level):
        """Test HTTP client libraries never log below WARNING."""
        setup_logging(logging_config.model_copy(update={"log_level": log_level}))

        assert logging.getLogger("httpx").getEffectiveLevel() >= logging.WARNING
        assert logging.getLogger("httpcore").getEffectiveLevel() >= logging.WARNING

    @pytest.mark.asyncio
    async def test_weather_api_key_not_logged(self, logging_config, openweather_payload, restore_logging):
        """Test a weather request does not write the API key to the log file."""
        setup_logging(logging_config)
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=openweather_payload)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        service = WeatherService(logging_config, http_client=http_client)

        reading = await service.fetch_weather("Lima")
        await service.aclose()

        assert reading is not None
        assert requests[0].url.params["appid"] == SECRET_KEY
        content = _read_log(logging_config)
        assert "Fetching current weather" in content
        assert SECRET_KEY not in content
