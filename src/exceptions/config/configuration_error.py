from src.exceptions.base import ClimaBotError


class ConfigurationError(ClimaBotError):
    """Exception for missing or invalid startup configuration."""

    pass
