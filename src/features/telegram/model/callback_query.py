from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.message import Message
from features.telegram.model.user import User


class CallbackQuery(BaseModel):
    """https://core.telegram.org/bots/api#callbackquery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str | None = None
    from_user: User | None = Field(None, alias = "from")
    message: Message | None = None
    inline_message_id: str | None = None
    chat_instance: str | None = None
    data: str | None = None
