from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.chat import Chat
from features.telegram.model.user import User


class Message(BaseModel):
    """https://core.telegram.org/bots/api#message"""
    model_config = ConfigDict(populate_by_name = True, extra = "allow")

    # every field is optional: updates with partial payloads still cast
    message_id: int | None = None
    chat: Chat | None = None
    date: int | None = None
    from_user: User | None = Field(None, alias = "from")
    text: str | None = None
    caption: str | None = None
    reply_to_message: Optional["Message"] = None
    edit_date: int | None = None


Message.model_rebuild()
