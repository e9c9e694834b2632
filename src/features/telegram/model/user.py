from pydantic import BaseModel


class User(BaseModel):
    """https://core.telegram.org/bots/api#user"""
    id: int | None = None
    is_bot: bool = False
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
