from src.exceptions.upstream.upstream_error import UpstreamError


class LLMConnectionError(UpstreamError):
    """Exception for transport failures or timeouts when calling the LLM."""

    pass
