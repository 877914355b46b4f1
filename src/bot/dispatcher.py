import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol, Set

import structlog

from src.exceptions.upstream import UpstreamError
from src.models.orchestrator import WeatherQuery

logger = structlog.get_logger(__name__)

APOLOGY_REPLY = "❌ Lo siento, ocurrió un error al procesar tu consulta. Inténtalo de nuevo más tarde."


class ReplyChannel(Protocol):
    """Outbound side of a chat channel."""

    async def send(self, text: str) -> None: ...

    async def show_typing(self) -> None: ...


@dataclass(frozen=True)
class InboundMessage:
    """A chat message as seen by the dispatcher."""

    author_is_bot: bool
    text: str
    channel: ReplyChannel


class MessageDispatcher:
    """
    Filters inbound chat messages and answers the weather questions among them.

    Each qualifying message is handled in its own asyncio task so that a slow
    pipeline run never holds up the gateway's event handling. This is also the
    only place where pipeline failures are turned into a user-facing message.
    """

    def __init__(self, orchestrator, trigger: str = "!clima"):
        self.orchestrator = orchestrator
        self.trigger = trigger
        self._tasks: Set[asyncio.Task] = set()
        self._closing = False

    def should_dispatch(self, message: InboundMessage) -> bool:
        if message.author_is_bot:
            return False
        return message.text.startswith(self.trigger)

    def extract_question(self, text: str) -> str:
        return text[len(self.trigger):].strip()

    def dispatch(self, message: InboundMessage) -> Optional[asyncio.Task]:
        """
        Schedule a qualifying message for handling and return immediately.

        Must be called from within the running event loop.

        Returns:
            The task handling the message, or None if the message was ignored
            or the dispatcher is draining
        """
        if self._closing or not self.should_dispatch(message):
            return None

        task = asyncio.create_task(self.handle(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def handle(self, message: InboundMessage):
        """Run the pipeline for one message and send exactly one reply."""
        question = self.extract_question(message.text)

        try:
            await message.channel.show_typing()
        except Exception as e:
            logger.warning("Could not show typing indicator", error=str(e))

        try:
            reply = await self.orchestrator.process_query(WeatherQuery(raw_question=question))
            text = reply.text
        except UpstreamError as e:
            logger.error(
                "Weather query failed",
                question=question,
                error_type=type(e).__name__,
                error=str(e),
                cause=str(e.__cause__) if e.__cause__ else None,
            )
            text = APOLOGY_REPLY
        except Exception as e:
            logger.error("Unexpected error processing weather query", question=question, error=str(e), exc_info=True)
            text = APOLOGY_REPLY

        try:
            await message.channel.send(text)
        except Exception as e:
            logger.error("Failed to send reply", question=question, error=str(e), exc_info=True)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    @property
    def closing(self) -> bool:
        return self._closing

    async def drain(self):
        """Stop accepting messages and wait for every in-flight one to be handled."""
        self._closing = True
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
