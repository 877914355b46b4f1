from src.exceptions.config.configuration_error import ConfigurationError

__all__ = ["ConfigurationError"]
