from src.exceptions.upstream.upstream_error import UpstreamError


class WeatherRequestError(UpstreamError):
    """Exception for transport failures when calling the weather provider."""

    pass
