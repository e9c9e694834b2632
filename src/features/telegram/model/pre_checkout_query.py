from pydantic import BaseModel, ConfigDict, Field

from features.telegram.model.user import User


class PreCheckoutQuery(BaseModel):
    """https://core.telegram.org/bots/api#precheckoutquery"""
    model_config = ConfigDict(populate_by_name = True, extra = "allow")

    id: str | None = None
    from_user: User | None = Field(None, alias = "from")
    currency: str | None = None
    total_amount: int | None = None
    invoice_payload: str | None = None
