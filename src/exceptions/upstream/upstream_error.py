from src.exceptions.base import ClimaBotError


class UpstreamError(ClimaBotError):
    """Base exception for failures talking to the LLM or weather providers."""

    pass
