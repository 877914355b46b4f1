from typing import Optional

import httpx
import structlog
from openai import APIConnectionError, APIError, APIStatusError, AsyncOpenAI

from src.config.config import Config
from src.exceptions.upstream import LLMConnectionError, LLMResponseError

logger = structlog.get_logger(__name__)


class LLMService:
    """
    Single-turn chat completions against Groq's OpenAI-compatible API.

    The client never retries. Transport problems surface as LLMConnectionError;
    error statuses and completions without text surface as LLMResponseError.
    """

    def __init__(self, config: Config, client: Optional[AsyncOpenAI] = None):
        """
        Initialize the LLM service.

        Args:
            config: Application configuration
            client: Shared OpenAI-compatible client; one is created when omitted
        """
        self.model = config.groq_model
        self._client = client or AsyncOpenAI(
            api_key=config.groq_api_key,
            base_url=config.groq_base_url,
            timeout=httpx.Timeout(config.request_timeout_seconds, connect=config.connect_timeout_seconds),
            max_retries=0,
        )

    async def complete(self, prompt: str, *, temperature: float, max_tokens: int) -> str:
        """
        Send one user message and return the text of the first choice.

        Args:
            prompt: Full prompt, sent as a single user message
            temperature: Sampling temperature
            max_tokens: Output token cap

        Returns:
            Raw content of the first completion choice

        Raises:
            LLMConnectionError: If the request could not be completed
            LLMResponseError: If the API answered with an error or no text
        """
        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except APIConnectionError as e:
            logger.error("LLM request failed", model=self.model, error=str(e))
            raise LLMConnectionError(f"LLM request failed: {str(e)}") from e
        except APIStatusError as e:
            logger.error("LLM API returned an error status", model=self.model, status_code=e.status_code)
            raise LLMResponseError(f"LLM API returned status {e.status_code}") from e
        except APIError as e:
            logger.error("LLM API returned an invalid response", model=self.model, error=str(e))
            raise LLMResponseError(f"Invalid LLM response: {str(e)}") from e

        choices = getattr(completion, "choices", None)
        if not choices:
            raise LLMResponseError("LLM response contained no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            raise LLMResponseError("LLM response contained no message content")

        return content

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.close()
