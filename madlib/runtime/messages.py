"""Host boundary types: what the bot hands us and what we hand back."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Message:
    """An inbound chat message.

    Attributes:
        text: Message body as typed by the user.
        channel: Where replies should go.
        is_addressed: True when the bot was directly addressed.
    """

    text: str
    channel: str
    is_addressed: bool = False


@dataclass(frozen=True)
class Reply:
    channel: str
    text: str


@dataclass(frozen=True)
class HandleResult:
    """Outcome of handling one message.

    `consumed` False means the message was not for us and the host may pass
    it to other handlers; `replies` is empty in that case.
    """

    consumed: bool
    replies: list[Reply] = field(default_factory=list)


class ReplySender(Protocol):
    def __call__(self, channel: str, text: str) -> None:
        ...
