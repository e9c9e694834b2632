from pydantic import BaseModel


class Location(BaseModel):
    """https://core.telegram.org/bots/api#location"""
    latitude: float | None = None
    longitude: float | None = None
