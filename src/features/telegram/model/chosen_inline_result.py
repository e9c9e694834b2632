from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.location import Location
from features.telegram.model.user import User


class ChosenInlineResult(BaseModel):
    """https://core.telegram.org/bots/api#choseninlineresult"""
    model_config = ConfigDict(populate_by_name = True)

    result_id: str | None = None
    from_user: User | None = Field(None, alias = "from")
    query: str | None = None
    location: Location | None = None
    inline_message_id: str | None = None
