from src.exceptions.upstream.upstream_error import UpstreamError


class LLMResponseError(UpstreamError):
    """Exception for error statuses or malformed completions from the LLM."""

    pass
