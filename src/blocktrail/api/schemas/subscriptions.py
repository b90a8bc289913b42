from pydantic import BaseModel


class SubscribeResponse(BaseModel):
    address: str
    success: bool


class SubscriptionList(BaseModel):
    addresses: list[str]
    total: int
