from src.bot.dispatcher import APOLOGY_REPLY, InboundMessage, MessageDispatcher, ReplyChannel

__all__ = ["APOLOGY_REPLY", "InboundMessage", "MessageDispatcher", "ReplyChannel"]
