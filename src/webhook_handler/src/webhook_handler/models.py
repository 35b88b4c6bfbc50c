"""Pydantic schemas for Telegram updates and Bot API replies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

REPLY_PREFIX = "You said: "


class Chat(BaseModel):
    """Chat the message was sent in."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None


class Message(BaseModel):
    """Inbound chat message; only the fields the echo reply reads."""

    model_config = ConfigDict(extra="allow")

    chat: Chat | None = None
    text: str | None = None


class Update(BaseModel):
    """Telegram update delivered to the webhook."""

    model_config = ConfigDict(extra="allow")

    message: Message | None = None


class OutboundReply(BaseModel):
    """``sendMessage`` request echoing the inbound text."""

    chat_id: int | str | None = None
    text: str

    @classmethod
    def echo(cls, message: Message) -> OutboundReply:
        """Build the reply for ``message``; missing fields stay unset."""
        chat_id = message.chat.id if message.chat is not None else None
        return cls(chat_id=chat_id, text=REPLY_PREFIX + (message.text or ""))

    def to_params(self) -> dict[str, str]:
        """Return query parameters; an unset chat id is sent empty."""
        return {
            "chat_id": "" if self.chat_id is None else str(self.chat_id),
            "text": self.text,
        }
