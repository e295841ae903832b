from fastapi import APIRouter, Depends

from madlib.api.core.container import get_container
from madlib.api.schemas import MessageIn, MessageResult, ReplyOut
from madlib.runtime.messages import Message

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post(
    "",
    summary="Handle a chat message",
    description="Runs a message through the madlib plugin and returns its replies.",
    response_model=MessageResult,
)
async def handle_message(
    payload: MessageIn,
    container=Depends(get_container),
):
    result = container.plugin.interpret(
        Message(
            text=payload.text,
            channel=payload.channel,
            is_addressed=payload.is_addressed,
        )
    )
    return MessageResult(
        consumed=result.consumed,
        replies=[ReplyOut(channel=r.channel, text=r.text) for r in result.replies],
    )
