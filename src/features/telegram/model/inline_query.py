from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.location import Location
from features.telegram.model.user import User


class InlineQuery(BaseModel):
    """https://core.telegram.org/bots/api#inlinequery"""
    model_config = ConfigDict(populate_by_name = True)

    id: str | None = None
    from_user: User | None = Field(None, alias = "from")
    query: str | None = None
    offset: str | None = None
    location: Location | None = None
