import discord
import structlog

from src.bot.dispatcher import InboundMessage, MessageDispatcher

logger = structlog.get_logger(__name__)


class DiscordReplyChannel:
    """ReplyChannel backed by a discord.py messageable channel."""

    def __init__(self, channel: discord.abc.Messageable):
        self._channel = channel

    async def send(self, text: str) -> None:
        await self._channel.send(text)

    async def show_typing(self) -> None:
        await self._channel.typing()


def to_inbound_message(message: discord.Message) -> InboundMessage:
    return InboundMessage(
        author_is_bot=message.author.bot,
        text=message.content,
        channel=DiscordReplyChannel(message.channel),
    )


class ClimaDiscordClient(discord.Client):
    """Discord gateway client that forwards messages to the dispatcher."""

    def __init__(self, dispatcher: MessageDispatcher, services=(), **kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guild_messages = True
        super().__init__(intents=intents, **kwargs)

        self.dispatcher = dispatcher
        self._services = list(services)

    async def on_ready(self):
        logger.info("Connected to Discord", user=str(self.user), guilds=len(self.guilds))

    async def on_message(self, message: discord.Message):
        self.dispatcher.dispatch(to_inbound_message(message))

    async def close(self):
        """Let in-flight questions finish, then release HTTP clients."""
        logger.info("Shutting down Discord client", pending=self.dispatcher.pending)
        await self.dispatcher.drain()
        for service in self._services:
            await service.aclose()
        await super().close()
