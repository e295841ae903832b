from pydantic import BaseModel, Field


class MessageIn(BaseModel):
    """A chat message forwarded by the bot host."""

    text: str = Field(description="Message body as typed by the user")
    channel: str = Field(min_length=1, description="Channel to reply to")
    is_addressed: bool = Field(
        default=False,
        description="True when the bot was directly addressed"
    )


class ReplyOut(BaseModel):
    channel: str
    text: str


class MessageResult(BaseModel):
    consumed: bool = Field(description="False when the message was not a madlib command")
    replies: list[ReplyOut] = Field(default_factory=list)


class MadlibList(BaseModel):
    names: list[str]
