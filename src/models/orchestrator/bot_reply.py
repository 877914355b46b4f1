from pydantic import BaseModel, ConfigDict, Field


class BotReply(BaseModel):
    """Final text sent back to the chat channel."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Reply text")
