from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.user import User


class ShippingQuery(BaseModel):
    """https://core.telegram.org/bots/api#shippingquery"""
    model_config = ConfigDict(populate_by_name = True, extra = "allow")

    id: str | None = None
    from_user: User | None = Field(None, alias = "from")
    invoice_payload: str | None = None
